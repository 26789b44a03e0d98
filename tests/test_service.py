"""Tests for StockControlService imports and ledger mutations."""

import pytest
from core.config import OWNER_EXECUTOR, USAGE_INSTALLATION, USAGE_SUPPLY
from core.errors import DuplicateTechnicianError, FormatError, PreconditionError
from core.models import ImportKind, InstallationDraft, SelectedItem, TechnicianType, TransferItem
from tests.conftest import (
    BRANCH_ROWS,
    JUNIOR,
    SUPERVISOR,
    branch_csv,
    branch_id,
    build_stock_csv,
    build_workbook,
    stock_entry,
    tech_id,
    technician_csv,
    upload,
)


def stock_upload(entries: list[tuple], name: str = "stock.csv"):
    """Stock CSV upload from (row, first_col, device, model, qty) tuples."""
    cells = {}
    for row, col, device, model, qty in entries:
        cells.update(stock_entry(row, col, device, model, qty))
    return upload(name, build_stock_csv(cells))


def seed_stock(service, owner: str, entries: list[tuple]):
    service.import_stock([stock_upload(entries)], owner)
    return service.state.ledger.lines_for_owner(service.resolve_owner(owner))


def find_line(service, owner: str, device: str):
    for line in service.state.ledger.lines_for_owner(owner):
        if line.device == device:
            return line
    raise KeyError(device)


class TestStockImport:
    """Bulk stock upload for one owner."""

    def test_requires_roster(self, service):
        with pytest.raises(PreconditionError):
            service.import_stock([stock_upload([(10, 1, "SENSOR", "M", 2)])], "JUAN PEREZ")
        assert len(service.state.ledger) == 0

    def test_owner_must_be_known(self, loaded_service):
        with pytest.raises(PreconditionError):
            loaded_service.import_stock([stock_upload([(10, 1, "SENSOR", "M", 2)])], "NADIE")

    def test_import_files_requires_owner_for_stock(self, loaded_service):
        with pytest.raises(PreconditionError):
            loaded_service.import_files(ImportKind.STOCK, [stock_upload([(10, 1, "SENSOR", "M", 2)])])

    def test_replaces_only_that_owner(self, loaded_service):
        seed_stock(loaded_service, "JUAN PEREZ", [(10, 1, "SENSOR", "M", 2), (10, 5, "CAMARA", "C", 1)])
        pedro_before = seed_stock(loaded_service, "PEDRO RAMIREZ", [(39, 1, "TAQUETE", "1/4", 10)])

        result = loaded_service.import_files(
            ImportKind.STOCK,
            [
                stock_upload([(10, 1, "SIRENA", "S", 1)], "a.csv"),
                stock_upload([(39, 5, "CABLE", "UTP", 3), (39, 9, "BATERIA", "12V", 2)], "b.csv"),
            ],
            owner="JUAN PEREZ",
        )

        assert result.count == 3
        assert result.file_count == 2
        juan = loaded_service.state.ledger.lines_for_owner("JUAN PEREZ")
        assert sorted(l.device for l in juan) == ["BATERIA", "CABLE", "SIRENA"]
        assert loaded_service.state.ledger.lines_for_owner("PEDRO RAMIREZ") == pedro_before

    def test_override_owner_redirects_to_supervisor(self, loaded_service):
        result = loaded_service.import_stock([stock_upload([(10, 1, "SENSOR", "M", 2)])], JUNIOR)

        assert result.was_redirected
        assert result.effective_owner == SUPERVISOR
        assert loaded_service.state.ledger.lines_for_owner(JUNIOR) == []
        assert len(loaded_service.state.ledger.lines_for_owner(SUPERVISOR)) == 1

    def test_executor_pool_accepted(self, loaded_service):
        lines = seed_stock(loaded_service, OWNER_EXECUTOR, [(10, 1, "SENSOR", "M", 2)])
        assert [l.owner for l in lines] == [OWNER_EXECUTOR]

    def test_unrecognized_file_keeps_existing_stock(self, loaded_service):
        before = seed_stock(loaded_service, "JUAN PEREZ", [(10, 1, "SENSOR", "M", 2)])

        with pytest.raises(FormatError):
            loaded_service.import_stock([upload("x.csv", "nada,que,ver")], "JUAN PEREZ")

        assert loaded_service.state.ledger.lines_for_owner("JUAN PEREZ") == before

    def test_unreadable_excel_is_format_error(self, loaded_service):
        with pytest.raises(FormatError):
            loaded_service.import_stock([("stock.xlsx", b"not excel")], "JUAN PEREZ")


class TestDirectoryImports:
    """Roster, branches, service history and catalog uploads."""

    def test_technicians_replace_roster(self, loaded_service):
        result = loaded_service.import_files(
            ImportKind.TECHNICIANS,
            [upload("t.csv", technician_csv([("luis gomez", "Ejecutor")]))],
        )
        assert result.count == 1
        assert [(t.name, t.type) for t in loaded_service.technicians] == [("LUIS GOMEZ", TechnicianType.EJECUTOR)]

    def test_technician_ids_unique_across_files(self, service):
        service.import_technicians([
            upload("a.csv", technician_csv([("A", "")])),
            upload("b.csv", technician_csv([("B", "")])),
        ])
        ids = [t.id for t in service.technicians]
        assert len(set(ids)) == 2

    def test_unrecognized_roster_rejected(self, loaded_service):
        with pytest.raises(FormatError):
            loaded_service.import_technicians([upload("t.csv", "FOO\nBAR")])
        assert len(loaded_service.technicians) == 4

    def test_branch_files_with_same_row_ids_both_kept(self, service):
        rows_a = [("BANAMEX", str(i), "S", f"A{i}", "") for i in range(3)]
        rows_b = [("SANTANDER", str(i), "S", f"B{i}", "") for i in range(3)]

        result = service.import_branches([
            upload("a.csv", branch_csv(rows_a)),
            upload("b.csv", branch_csv(rows_b)),
        ])

        assert result.count == 6
        ids = [b.id for b in service.branches]
        assert len(set(ids)) == 6
        assert {b.name for b in service.branches if b.id.startswith("branch-3-")} == {"A2", "B2"}

    def test_empty_branch_file_rejected(self, loaded_service):
        with pytest.raises(FormatError):
            loaded_service.import_branches([upload("b.csv", "CLIENTE,SIRH")])
        assert len(loaded_service.branches) == len(BRANCH_ROWS)

    def test_service_history_appends(self, loaded_service):
        text = "TICKET,FOLIO,SUCURSAL\nT1,F1,CENTRO\nT2,F2,NORTE"
        loaded_service.import_files(ImportKind.SERVICES, [upload("h.csv", text)])
        loaded_service.import_files(ImportKind.SERVICES, [upload("h.csv", text)])
        assert [log.folio_comexa for log in loaded_service.logs] == ["F1", "F2", "F1", "F2"]

    def test_service_history_missing_columns(self, loaded_service):
        with pytest.raises(FormatError) as exc_info:
            loaded_service.import_service_history([upload("h.csv", "TICKET\nT1")])
        assert exc_info.value.warnings
        assert loaded_service.logs == []

    def test_catalog_overwrites_found_clients_only(self, loaded_service):
        santander_before = loaded_service.catalog["SANTANDER"]
        data = build_workbook({"BANAMEX": [["CCTV", "CAMARA NUEVA", "N1"]]})

        result = loaded_service.import_files(ImportKind.CATALOG, [("catalogo.xlsx", data)])

        assert result.clients == ["BANAMEX"]
        assert [i.device for i in loaded_service.catalog["BANAMEX"]] == ["CAMARA NUEVA"]
        assert loaded_service.catalog["SANTANDER"] == santander_before

    def test_catalog_without_client_sheets_rejected(self, loaded_service):
        data = build_workbook({"Hoja1": [["CCTV", "CAMARA", "N1"]]})
        with pytest.raises(FormatError):
            loaded_service.import_catalog([("catalogo.xlsx", data)])

    def test_no_files(self, loaded_service):
        with pytest.raises(PreconditionError):
            loaded_service.import_files(ImportKind.BRANCHES, [])


class TestRoster:

    def test_duplicate_name_rejected_any_case(self, service):
        service.add_technician("JUAN PEREZ")
        with pytest.raises(DuplicateTechnicianError):
            service.add_technician("juan perez")
        assert [t.name for t in service.technicians] == ["JUAN PEREZ"]

    def test_name_normalized(self, service):
        tech = service.add_technician("  maria lopez ", TechnicianType.EJECUTOR)
        assert tech.name == "MARIA LOPEZ"
        assert tech.type == TechnicianType.EJECUTOR

    def test_blank_name_rejected(self, service):
        with pytest.raises(PreconditionError):
            service.add_technician("   ")

    def test_owner_choices(self, loaded_service):
        assert loaded_service.owner_choices()[0] == "JUAN PEREZ"
        assert len(loaded_service.owner_choices()) == 4


class TestTransfer:
    """Stock movement between owners."""

    def test_quantity_is_conserved(self, loaded_service):
        seed_stock(loaded_service, "JUAN PEREZ", [(10, 1, "SENSOR", "M", 10)])
        seed_stock(loaded_service, "PEDRO RAMIREZ", [(10, 1, "SENSOR", "M", 1)])
        source_line = find_line(loaded_service, "JUAN PEREZ", "SENSOR")
        before = loaded_service.state.ledger.total_quantity("SENSOR", "M")

        result = loaded_service.transfer_stock("JUAN PEREZ", "PEDRO RAMIREZ", [TransferItem(source_line.id, 4)])

        ledger = loaded_service.state.ledger
        assert ledger.total_quantity("SENSOR", "M") == before
        assert ledger.get(source_line.id).quantity == 6
        assert find_line(loaded_service, "PEDRO RAMIREZ", "SENSOR").quantity == 5
        assert len(ledger.lines_for_owner("PEDRO RAMIREZ")) == 1
        assert result.moved_lines == 1

    def test_one_log_per_transfer(self, loaded_service):
        lines = seed_stock(loaded_service, "JUAN PEREZ", [(10, 1, "SENSOR", "M", 3), (10, 5, "CAMARA", "C", 2)])

        result = loaded_service.transfer_stock(
            "JUAN PEREZ", "PEDRO RAMIREZ", [TransferItem(l.id, 1) for l in lines]
        )

        assert loaded_service.logs == [result.log]
        log = result.log
        assert log.technician_name == "JUAN PEREZ -> PEDRO RAMIREZ"
        assert log.sctask == "TRANSFERENCIA"
        assert log.branch_name == "MOVIMIENTO STOCK"
        assert log.branch_region == "ALMACEN CENTRAL"
        assert log.warranty_applied is False
        assert log.warranty_reason == "Transferencia de Stock"
        assert [i.usage_type for i in log.items_used] == [USAGE_SUPPLY, USAGE_SUPPLY]

    def test_same_owner_rejected(self, loaded_service):
        with pytest.raises(PreconditionError):
            loaded_service.transfer_stock("JUAN PEREZ", "JUAN PEREZ", [])

    def test_override_collision_rejected(self, loaded_service):
        lines = seed_stock(loaded_service, SUPERVISOR, [(10, 1, "SENSOR", "M", 3)])
        with pytest.raises(PreconditionError):
            loaded_service.transfer_stock(SUPERVISOR, JUNIOR, [TransferItem(lines[0].id, 1)])
        assert loaded_service.state.ledger.get(lines[0].id).quantity == 3
        assert loaded_service.logs == []

    def test_destination_redirected_but_log_shows_nominal(self, loaded_service):
        lines = seed_stock(loaded_service, "JUAN PEREZ", [(10, 1, "SENSOR", "M", 3)])

        result = loaded_service.transfer_stock("JUAN PEREZ", JUNIOR, [TransferItem(lines[0].id, 2)])

        assert result.was_redirected
        assert result.final_destination == SUPERVISOR
        assert find_line(loaded_service, SUPERVISOR, "SENSOR").quantity == 2
        assert result.log.technician_name == f"JUAN PEREZ -> {JUNIOR}"

    def test_mismatched_owner_item_skipped(self, loaded_service):
        juan = seed_stock(loaded_service, "JUAN PEREZ", [(10, 1, "SENSOR", "M", 3)])
        pedro = seed_stock(loaded_service, "PEDRO RAMIREZ", [(10, 5, "CAMARA", "C", 3)])

        result = loaded_service.transfer_stock(
            "JUAN PEREZ", SUPERVISOR,
            [TransferItem(juan[0].id, 1), TransferItem(pedro[0].id, 1), TransferItem("missing", 1)],
        )

        assert result.skipped_line_ids == [pedro[0].id, "missing"]
        assert loaded_service.state.ledger.get(pedro[0].id).quantity == 3
        assert [i.device for i in result.log.items_used] == ["SENSOR"]

    def test_over_request_moves_what_exists(self, loaded_service):
        lines = seed_stock(loaded_service, "JUAN PEREZ", [(10, 1, "SENSOR", "M", 3)])

        result = loaded_service.transfer_stock("JUAN PEREZ", "PEDRO RAMIREZ", [TransferItem(lines[0].id, 50)])

        assert result.log.items_used[0].quantity == 3
        assert loaded_service.state.ledger.get(lines[0].id).quantity == 0


class TestDirectAdd:

    def test_override_lands_on_supervisor_log_keeps_requester(self, loaded_service):
        log = loaded_service.direct_add_stock(tech_id(loaded_service, JUNIOR), "MISCELANEOS", "X", "Y", 5)

        line = find_line(loaded_service, SUPERVISOR, "X")
        assert line.quantity == 5
        assert line.model == "Y"
        assert line.category == "MISCELANEOS"
        assert loaded_service.state.ledger.lines_for_owner(JUNIOR) == []
        assert log.technician_name == JUNIOR
        assert log.sctask == "COMPRA/SOLICITUD"
        assert log.branch_name == "INGRESO DIRECTO"
        assert log.items_used[0].quantity == 5
        assert log.items_used[0].usage_type == USAGE_SUPPLY

    def test_merges_with_existing_line(self, loaded_service):
        seed_stock(loaded_service, "JUAN PEREZ", [(39, 1, "TAQUETE", "1/4", 10)])
        loaded_service.direct_add_stock(tech_id(loaded_service, "JUAN PEREZ"), "MISCELANEOS", "TAQUETE", "1/4", 5)
        assert find_line(loaded_service, "JUAN PEREZ", "TAQUETE").quantity == 15

    @pytest.mark.parametrize("device,qty", [("X", 0), ("X", -1), ("  ", 1)])
    def test_invalid_input_rejected(self, loaded_service, device, qty):
        with pytest.raises(PreconditionError):
            loaded_service.direct_add_stock(tech_id(loaded_service, "JUAN PEREZ"), "CCTV", device, "M", qty)
        assert len(loaded_service.state.ledger) == 0

    def test_unknown_technician(self, loaded_service):
        with pytest.raises(PreconditionError):
            loaded_service.direct_add_stock("tech-x", "CCTV", "X", "M", 1)


class TestInstallation:
    """Consuming stock at a branch."""

    def make_draft(self, service, tech_name="JUAN PEREZ", sirh="1001", items=None, **kwargs):
        defaults = dict(
            technician_id=tech_id(service, tech_name),
            branch_id=branch_id(service, sirh),
            report_date="2024-05-01",
            installation_date="2024-05-02",
            folio_comexa="FC-1",
            warranty_applied=False,
            warranty_reason="Instalación nueva",
            items=items or [],
        )
        defaults.update(kwargs)
        return InstallationDraft(**defaults)

    def test_consumption_debits_and_snapshots(self, loaded_service):
        lines = seed_stock(loaded_service, "JUAN PEREZ", [(10, 5, "CAMARA", "C-1", 10)])
        draft = self.make_draft(loaded_service, items=[SelectedItem(lines[0].id, 3)])

        log = loaded_service.record_installation(draft)

        assert loaded_service.state.ledger.get(lines[0].id).quantity == 7
        assert len(log.items_used) == 1
        item = log.items_used[0]
        assert (item.device, item.model, item.quantity, item.usage_type) == ("CAMARA", "C-1", 3, USAGE_INSTALLATION)
        assert log.technician_name == "JUAN PEREZ"
        assert (log.branch_name, log.branch_sirh, log.branch_region) == ("CENTRO MERIDA", "1001", "SURESTE")
        assert loaded_service.logs[0] == log

    def test_executor_pool_and_supervisor_stock_available_to_junior(self, loaded_service):
        pool = seed_stock(loaded_service, OWNER_EXECUTOR, [(39, 5, "CABLE", "UTP", 20)])
        sup = seed_stock(loaded_service, SUPERVISOR, [(10, 1, "SENSOR", "M", 4)])

        available = {l.id for l in loaded_service.available_stock(tech_id(loaded_service, JUNIOR))}
        assert available == {pool[0].id, sup[0].id}

        draft = self.make_draft(
            loaded_service, tech_name=JUNIOR,
            items=[SelectedItem(pool[0].id, 5, USAGE_SUPPLY), SelectedItem(sup[0].id, 1)],
        )
        loaded_service.record_installation(draft)
        assert loaded_service.state.ledger.get(pool[0].id).quantity == 15

    def test_other_owners_stock_rejected(self, loaded_service):
        pedro = seed_stock(loaded_service, "PEDRO RAMIREZ", [(10, 1, "SENSOR", "M", 4)])
        draft = self.make_draft(loaded_service, items=[SelectedItem(pedro[0].id, 1)])

        with pytest.raises(PreconditionError):
            loaded_service.record_installation(draft)
        assert loaded_service.state.ledger.get(pedro[0].id).quantity == 4

    def test_warranty_decision_required(self, loaded_service):
        lines = seed_stock(loaded_service, "JUAN PEREZ", [(10, 1, "SENSOR", "M", 4)])
        draft = self.make_draft(loaded_service, items=[SelectedItem(lines[0].id, 1)], warranty_applied=None)
        with pytest.raises(PreconditionError):
            loaded_service.record_installation(draft)

    def test_warranty_reason_required(self, loaded_service):
        lines = seed_stock(loaded_service, "JUAN PEREZ", [(10, 1, "SENSOR", "M", 4)])
        draft = self.make_draft(loaded_service, items=[SelectedItem(lines[0].id, 1)], warranty_reason="  ")
        with pytest.raises(PreconditionError):
            loaded_service.record_installation(draft)

    def test_items_required(self, loaded_service):
        with pytest.raises(PreconditionError):
            loaded_service.record_installation(self.make_draft(loaded_service))

    def test_invalid_second_item_changes_nothing(self, loaded_service):
        lines = seed_stock(loaded_service, "JUAN PEREZ", [(10, 1, "SENSOR", "M", 4)])
        draft = self.make_draft(
            loaded_service,
            items=[SelectedItem(lines[0].id, 1), SelectedItem("ghost", 1)],
        )
        with pytest.raises(PreconditionError):
            loaded_service.record_installation(draft)
        assert loaded_service.state.ledger.get(lines[0].id).quantity == 4
        assert loaded_service.logs == []

    def test_duplicate_selection_rejected(self, loaded_service):
        lines = seed_stock(loaded_service, "JUAN PEREZ", [(10, 1, "SENSOR", "M", 4)])
        draft = self.make_draft(
            loaded_service,
            items=[SelectedItem(lines[0].id, 1), SelectedItem(lines[0].id, 2)],
        )
        with pytest.raises(PreconditionError):
            loaded_service.record_installation(draft)

    def test_over_request_logs_actual_amount(self, loaded_service):
        lines = seed_stock(loaded_service, "JUAN PEREZ", [(10, 1, "SENSOR", "M", 2)])
        draft = self.make_draft(loaded_service, items=[SelectedItem(lines[0].id, 5)])

        log = loaded_service.record_installation(draft)

        assert log.items_used[0].quantity == 2
        assert loaded_service.state.ledger.get(lines[0].id).quantity == 0

    def test_only_branch_client_identifiers_kept(self, loaded_service):
        lines = seed_stock(loaded_service, "JUAN PEREZ", [(10, 1, "SENSOR", "M", 4)])
        ids = dict(sctask="SC1", reqo="RQ1", sbo="SBO1", ticket="TK1")

        banamex = loaded_service.record_installation(
            self.make_draft(loaded_service, sirh="1001", items=[SelectedItem(lines[0].id, 1)], **ids)
        )
        santander = loaded_service.record_installation(
            self.make_draft(loaded_service, sirh="2002", items=[SelectedItem(lines[0].id, 1)], **ids)
        )

        assert (banamex.sctask, banamex.reqo, banamex.sbo, banamex.ticket) == ("SC1", "RQ1", "", "")
        assert (santander.sctask, santander.reqo, santander.sbo, santander.ticket) == ("", "", "SBO1", "")
        assert banamex.folio_comexa == santander.folio_comexa == "FC-1"

    def test_dates_normalized(self, loaded_service):
        lines = seed_stock(loaded_service, "JUAN PEREZ", [(10, 1, "SENSOR", "M", 4)])
        draft = self.make_draft(
            loaded_service, items=[SelectedItem(lines[0].id, 1)],
            report_date="05/03/2024", installation_date="2024-03-06",
        )
        log = loaded_service.record_installation(draft)
        assert (log.report_date, log.installation_date) == ("2024-03-05", "2024-03-06")
