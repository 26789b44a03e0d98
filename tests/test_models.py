"""Tests for record serialization and configuration."""

from core.models import InstallationLog, LedgerConfig, LogItem, StockLine, Technician, TechnicianType


class TestSerialization:
    """Persisted records use the camelCase keys of existing backups."""

    def test_log_keys(self):
        log = InstallationLog(
            id="log-1",
            technician_name="ANA",
            report_date="2024-01-01",
            installation_date="2024-01-02",
            branch_name="CENTRO",
            folio_comexa="F1",
            items_used=(LogItem("CAMARA", "C1", 2, "Suministro"),),
        )
        data = log.to_dict()

        assert data["folioComexa"] == "F1"
        assert data["technicianName"] == "ANA"
        assert data["itemsUsed"] == [{"device": "CAMARA", "model": "C1", "quantity": 2, "usageType": "Suministro"}]
        assert InstallationLog.from_dict(data) == log
        assert log.total_items == 2

    def test_old_logs_without_optional_fields(self):
        log = InstallationLog.from_dict({
            "id": "x",
            "technicianName": "ANA",
            "reportDate": "2024-01-01",
            "installationDate": "2024-01-01",
            "branchName": "CENTRO",
            "sctask": None,
            "itemsUsed": [],
        })
        assert log.sctask == ""
        assert log.items_used == ()

    def test_stock_line_defaults(self):
        line = StockLine.from_dict({"id": "s", "device": "DVR", "quantity": -3, "owner": "ANA"})
        assert line.model == "N/A"
        assert line.quantity == 0

    def test_unknown_technician_type_is_nomina(self):
        tech = Technician.from_dict({"id": "t", "name": "ANA", "type": "OTRO"})
        assert tech.type == TechnicianType.NOMINA


class TestLedgerConfig:

    def test_data_dir_from_environment(self, monkeypatch):
        monkeypatch.setenv("STOCK_CONTROL_DATA_DIR", "/tmp/comexa")
        assert LedgerConfig.from_env().data_dir == "/tmp/comexa"

    def test_default_overrides_are_copied(self):
        config = LedgerConfig()
        config.stock_overrides["X"] = "Y"
        assert "X" not in LedgerConfig().stock_overrides

    def test_document_reading_off_by_default(self):
        assert LedgerConfig().oracle is None
        assert LedgerConfig.from_env().oracle is None
