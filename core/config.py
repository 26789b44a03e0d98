"""Default configuration values."""

APP_NAME = "Comexa Stock Control"

# Shared stock pool used by generic executors
OWNER_EXECUTOR = "EJECUTOR"

# Stock file layout (0-indexed rows of the parsed table)
ROW_START_TOP = 10
ROW_END_TOP = 38
ROW_START_BOTTOM = 39

CATEGORY_ALARMS = "ALARMAS"
CATEGORY_CCTV = "CCTV"
CATEGORY_ACCESS = "CONTROL DE ACCESO"
CATEGORY_MISC = "MISCELANEOS"
CATEGORY_CABLING = "CABLEADO & FLEXIBLE"
CATEGORY_POWER = "FUENTES Y BATERIAS"
CATEGORIES = [
    CATEGORY_ALARMS,
    CATEGORY_CCTV,
    CATEGORY_ACCESS,
    CATEGORY_MISC,
    CATEGORY_CABLING,
    CATEGORY_POWER,
]

# Column triples (device, model, quantity) per band.
# Top band rows [ROW_START_TOP, ROW_END_TOP), bottom band rows [ROW_START_BOTTOM, end)
STOCK_TOP_BLOCKS: list[tuple[tuple[int, int, int], str]] = [
    ((1, 2, 3), CATEGORY_ALARMS),
    ((5, 6, 7), CATEGORY_CCTV),
    ((9, 10, 11), CATEGORY_ACCESS),
]
STOCK_BOTTOM_BLOCKS: list[tuple[tuple[int, int, int], str]] = [
    ((1, 2, 3), CATEGORY_MISC),
    ((5, 6, 7), CATEGORY_CABLING),
    ((9, 10, 11), CATEGORY_POWER),
]

CLIENT_BANAMEX = "BANAMEX"
CLIENT_SANTANDER = "SANTANDER"
CLIENT_BANREGIO = "BANREGIO"
CLIENTS = [CLIENT_BANAMEX, CLIENT_SANTANDER, CLIENT_BANREGIO]

# Which client-specific identifier fields an installation log keeps
CLIENT_IDENTIFIER_FIELDS: dict[str, tuple[str, ...]] = {
    CLIENT_BANAMEX: ("sctask", "reqo"),
    CLIENT_SANTANDER: ("sbo",),
    CLIENT_BANREGIO: ("ticket",),
}
ALL_IDENTIFIER_FIELDS = ("sctask", "reqo", "sbo", "ticket")

# Junior technician -> supervisor whose stock they actually use.
# Supervisors must never appear as keys (resolution is single-step).
STOCK_OVERRIDES: dict[str, str] = {
    "MAURO ISRAEL GUTIÉRREZ HEREDIA": "JULIO FERNANDO BARROSO CHAN",
    "ANGEL FERNANDO MOO MONTEJO": "JULIO FERNANDO BARROSO CHAN",
    "ALEX ROBERTO HOIL PUCH": "JULIO FERNANDO BARROSO CHAN",
}

DEFAULT_MODEL = "N/A"
DEFAULT_CATALOG_CATEGORY = CATEGORY_MISC
NO_REGION = "SIN REGIÓN"
NO_REGION_REPORT = "SIN REGION"

# Installation log usage types
USAGE_INSTALLATION = "Instalación"
USAGE_SUPPLY = "Suministro"
USAGE_SUPPLY_AND_INSTALLATION = "Suministro e instalación"
USAGE_TYPES = [USAGE_INSTALLATION, USAGE_SUPPLY, USAGE_SUPPLY_AND_INSTALLATION]

# Log sentinels for internal movements
TRANSFER_LOG = {
    "sctask": "TRANSFERENCIA",
    "reqo": "INTERNA",
    "folioComexa": "-",
    "branchName": "MOVIMIENTO STOCK",
    "branchSirh": "ALMACEN",
    "branchRegion": "ALMACEN CENTRAL",
    "warrantyReason": "Transferencia de Stock",
}
DIRECT_ADD_LOG = {
    "sctask": "COMPRA/SOLICITUD",
    "reqo": "EXTERNA",
    "folioComexa": "-",
    "branchName": "INGRESO DIRECTO",
    "branchSirh": "COMPRA",
    "branchRegion": "ADMINISTRACIÓN",
    "warrantyReason": "Ingreso Directo / Compra",
}
HISTORICAL_WARRANTY_REASON = "N/A - Carga histórica"

# Header keywords (matched against accent-free uppercase header text)
TECHNICIAN_NAME_KEYWORDS = ["IDC", "NOMBRE"]
TECHNICIAN_TYPE_KEYWORDS = ["TIPO", "ROL", "CATEGORIA"]

SERVICE_TICKET_KEYWORDS = ["SCTASK", "TICKET", "INCIDENTE", "INCIDENCIA"]
SERVICE_FOLIO_KEYWORDS = ["FOLIO"]
SERVICE_SIRH_KEYWORDS = ["SIRH"]
SERVICE_BRANCH_KEYWORDS = ["SUCURSAL", "INMUEBLE"]
SERVICE_REGION_KEYWORDS = ["REGION"]
SERVICE_REPORT_DATE_KEYWORDS = ["FECHA DE REGISTRO", "REGISTRO"]
SERVICE_INSTALL_DATE_KEYWORDS = ["FECHA DE ATENCION", "ATENCION", "FECHA DE SERVICIO"]
SERVICE_TECHNICIAN_KEYWORDS = ["RESPONSABLE", "TECNICO"]

CATALOG_HEADER_KEYWORDS = ["TIPO", "DISPOSITIVO"]

# Persisted blob keys (same as the browser app's local storage)
STORAGE_KEYS = {
    "stock": "comexa_stock",
    "technicians": "comexa_techs",
    "branches": "comexa_branches",
    "logs": "comexa_logs",
    "catalog": "comexa_catalog",
}

DEFAULT_DATA_DIR = "data"
DATA_DIR_ENV = "STOCK_CONTROL_DATA_DIR"
DEFAULT_LOG_LEVEL = "INFO"

# Report headers
STOCK_REPORT_COLUMNS = ["Categoria", "Dispositivo", "Modelo", "Cantidad", "Propietario"]
HISTORY_REPORT_COLUMNS = [
    "ID Registro",
    "Fecha Reporte",
    "Fecha Instalación",
    "SCTASK",
    "REQO",
    "Folio Comexa",
    "Técnico",
    "Sucursal (Nombre)",
    "Sucursal (SIRH)",
    "Región",
    "Dispositivo",
    "Modelo",
    "Cantidad",
    "Tipo de Uso",
]
EXECUTIVE_REPORT_COLUMNS = [
    "Región",
    "Sucursal",
    "Fecha Instalación",
    "Folio Comexa",
    "Técnico",
    "Total Items",
]
