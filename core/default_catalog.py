"""Built-in device catalog used until a catalog workbook is imported."""

from .config import (
    CLIENT_BANAMEX,
    CLIENT_SANTANDER,
    CATEGORY_ALARMS,
    CATEGORY_CCTV,
    CATEGORY_ACCESS,
    CATEGORY_MISC,
    CATEGORY_CABLING,
    CATEGORY_POWER,
)
from .models import CatalogItem


DEFAULT_DEVICE_CATALOG: dict[str, list[CatalogItem]] = {
    CLIENT_BANAMEX: [
        # ALARMAS
        CatalogItem(CATEGORY_ALARMS, "BASE DE HOCHIKI", "NS6-100"),
        CatalogItem(CATEGORY_ALARMS, "BOTÓN DE ASALTO DMP", "1142 - BC"),
        CatalogItem(CATEGORY_ALARMS, "BOTONERA DE ASALTO", "269R"),
        CatalogItem(CATEGORY_ALARMS, "CONTACTO MAGNÉTICO", "7939WG-WH"),
        CatalogItem(CATEGORY_ALARMS, "DETECTOR DE HUMO", "SF119-4(12)"),
        CatalogItem(CATEGORY_ALARMS, "DETECTOR DE MOVIMIENTO", "LC100"),
        CatalogItem(CATEGORY_ALARMS, "DETECTOR DE MOVIMIENTO", "LC200S"),
        CatalogItem(CATEGORY_ALARMS, "DETECTOR DE MOVIMIENTO", "DT 8035"),
        CatalogItem(CATEGORY_ALARMS, "DETECTOR DE TEMPERATURA HOCHIKI", "DFE -135"),
        CatalogItem(CATEGORY_ALARMS, "DETECTOR DE VIBRACIÓN (DV) PARA ATM", "DSC SS-102"),
        CatalogItem(CATEGORY_ALARMS, "DETECTOR SISMICO (DS) PARA BÓVEDA", "SC100"),
        CatalogItem(CATEGORY_ALARMS, "DETECTOR TÉRMICO", "503"),
        CatalogItem(CATEGORY_ALARMS, "ESTACIÓN MANUAL", "BG-12LSP"),
        CatalogItem(CATEGORY_ALARMS, "ESTROBO & SIRENA", "P2R-L"),
        CatalogItem(CATEGORY_ALARMS, "EXPANSORA DMP", "714-16"),
        CatalogItem(CATEGORY_ALARMS, "LUZ ESTROBO", ""),
        CatalogItem(CATEGORY_ALARMS, "MÓDULO RELAY DMP", "716"),
        CatalogItem(CATEGORY_ALARMS, "MÓDULO RELAY NOE O MC", "COMEXA"),
        CatalogItem(CATEGORY_ALARMS, "MÓDULO WIEGAND DMP", "734"),
        CatalogItem(CATEGORY_ALARMS, "MONEY CLIP LINEAR", "DXS-81"),
        CatalogItem(CATEGORY_ALARMS, "MONEY CLIP DMP", "1139"),
        CatalogItem(CATEGORY_ALARMS, "RECEPTORA DMP", "1100X"),
        CatalogItem(CATEGORY_ALARMS, "RECEPTORA PARA LINEAR", "DSXR-1508"),
        CatalogItem(CATEGORY_ALARMS, "SIRENA", "VARIOS"),
        CatalogItem(CATEGORY_ALARMS, "TAMPER SECOM ALAR", ""),
        CatalogItem(CATEGORY_ALARMS, "TARJETA DMP", "XR550-DN"),
        CatalogItem(CATEGORY_ALARMS, "TECLADO DMP", "7060W"),
        CatalogItem(CATEGORY_ALARMS, "TECLADO DMP TOUCH", "7800"),
        # CCTV
        CatalogItem(CATEGORY_CCTV, "ADAPTADOR (PLATO)", "SBP-301HMW2"),
        CatalogItem(CATEGORY_CCTV, "BRAZO MURO EXT", "SBP-300WM1"),
        CatalogItem(CATEGORY_CCTV, "BRAZO MURO INT", "SBP-120WMW"),
        CatalogItem(CATEGORY_CCTV, "CÁMARA 360° OJO DE PEZ IP", "XNF-8010R"),
        CatalogItem(CATEGORY_CCTV, "CÁMARA 180°", "PNM-C9022RV"),
        CatalogItem(CATEGORY_CCTV, "CÁMARA ANALOGICA EXT.", "SCV-6085R / HCV-6070R"),
        CatalogItem(CATEGORY_CCTV, "CÁMARA ANALOGICA INT.", "HCD-6070R"),
        CatalogItem(CATEGORY_CCTV, "CÁMARA AXIS", "P3245"),
        CatalogItem(CATEGORY_CCTV, "CÁMARA IP INT.", "QND-6082R"),
        CatalogItem(CATEGORY_CCTV, "CAMARA IP EXT.", "QNV-6082R"),
        CatalogItem(CATEGORY_CCTV, "GRABADOR DVR", "SRD-1676DN"),
        CatalogItem(CATEGORY_CCTV, "GRABADOR NVR", "XRN-6410"),
        CatalogItem(CATEGORY_CCTV, "HDD 8TB", "WD8002PURP"),
        CatalogItem(CATEGORY_CCTV, "HUB (16 CANALES)", "VARIOS"),
        CatalogItem(CATEGORY_CCTV, "JOYSTICK ANÁLAGO", "SPC-1010"),
        CatalogItem(CATEGORY_CCTV, "JOYSTICK IP", "DS-1600"),
        CatalogItem(CATEGORY_CCTV, "KIT TRANSCEPTOR (EPCOM-TITANIUM)", "VARIOS"),
        CatalogItem(CATEGORY_CCTV, "MEMORIA USB (32 GB)", ""),
        CatalogItem(CATEGORY_CCTV, "MONITOR CCTV (VARIOS TAMAÑOS)", "VARIOS"),
        CatalogItem(CATEGORY_CCTV, "PATCHCORD", ""),
        CatalogItem(CATEGORY_CCTV, "PTZ ANÁLOGA", "HCP-6320 HA"),
        CatalogItem(CATEGORY_CCTV, "PTZ IP", "QNP-6230RH"),
        CatalogItem(CATEGORY_CCTV, "TRANSCEPTOR", "EPCOM"),
        CatalogItem(CATEGORY_CCTV, "TRANSCEPTOR PASIVO", "NVT"),
        CatalogItem(CATEGORY_CCTV, "VENTILADOR DE NVR", "NOCTUA PREMIUN"),
        CatalogItem(CATEGORY_CCTV, "VENTILADOR PARA RACK", "LP-VENT-01"),
        # CONTROL DE ACCESO
        CatalogItem(CATEGORY_ACCESS, "BOTÓN DE EMERGENCIA (STI)", "SS2422EX-ES"),
        CatalogItem(CATEGORY_ACCESS, "BOTÓN DE LIBERACIÓN", "PRO800B / RP-26"),
        CatalogItem(CATEGORY_ACCESS, "BRACKET U PARA ELECTRÓIMAN (RCI)", "RCI"),
        CatalogItem(CATEGORY_ACCESS, "CENTRAL DE INTERFÓN 3 CANALES", "LEF-3"),
        CatalogItem(CATEGORY_ACCESS, "CENTRAL DE INTERFÓN 5 CANALES", "LEF-5"),
        CatalogItem(CATEGORY_ACCESS, "CONTRA CON PERNO (PTA CRISTAL)", "PROEB-500U"),
        CatalogItem(CATEGORY_ACCESS, "CONTRA ELÉCTRICA", "LOCK / PHILLIPS"),
        CatalogItem(CATEGORY_ACCESS, "CONTRA ELÉCTRICA", "ACCESSPRO / ADAM RITE"),
        CatalogItem(CATEGORY_ACCESS, "ELECTROIMÁN (1200 LB)", "ACCESSPRO"),
        CatalogItem(CATEGORY_ACCESS, "FRENTE DE INTERFÓN APARENTE", "LE-D"),
        CatalogItem(CATEGORY_ACCESS, "FRENTE DE INTERFÓN APARENTE INT.", "IF-DA"),
        CatalogItem(CATEGORY_ACCESS, "FRENTE DE INTERFÓN EMPOTRADO", "LE-DA"),
        CatalogItem(CATEGORY_ACCESS, "FUENTE DE ALIMENTACION", "CUTRON"),
        CatalogItem(CATEGORY_ACCESS, "FUENTE DE INTERFÓN", "PS-1225UL"),
        CatalogItem(CATEGORY_ACCESS, "LECTORA", "R10"),
        CatalogItem(CATEGORY_ACCESS, "LECTORA", "R20"),
        CatalogItem(CATEGORY_ACCESS, "LECTORA SIGNO", "R20KSP"),
        CatalogItem(CATEGORY_ACCESS, "LÓGICA ESCLUSA LITE", "COMEXA"),
        CatalogItem(CATEGORY_ACCESS, "LÓGICA ESCLUSA PARA DISCAPACITADOS", "COMEXA"),
        CatalogItem(CATEGORY_ACCESS, "LÓGICA ESCLUSA", "CUTRON"),
        CatalogItem(CATEGORY_ACCESS, "TARJETA R2", "R2"),
        CatalogItem(CATEGORY_ACCESS, "TARJETA IC", "IC"),
        CatalogItem(CATEGORY_ACCESS, "TECLADO", "ACCESSPRO / IEI"),
        CatalogItem(CATEGORY_ACCESS, "TECLADO COMEXA", "CESTEK"),
        CatalogItem(CATEGORY_ACCESS, "TECLADO COMEXA", "CURTISA / CUTRON"),
        CatalogItem(CATEGORY_ACCESS, "TECLADO ESCLUSA", "CUTRON"),
        # MISCELANEOS
        CatalogItem(CATEGORY_MISC, "BOTAS AZULES", ""),
        CatalogItem(CATEGORY_MISC, "JACKS (PATCHPANEL)", "VARIOS"),
        CatalogItem(CATEGORY_MISC, "LAMPARA LED", "COMEXA"),
        # CABLEADO
        CatalogItem(CATEGORY_CABLING, "CABLE 2X18 (ML)", "ML"),
        CatalogItem(CATEGORY_CABLING, "CABLE 4X22 (ML)", "ML"),
        CatalogItem(CATEGORY_CABLING, "CABLE 6X22 (ML)", "ML"),
        CatalogItem(CATEGORY_CABLING, "CABLE COAXIAL (ML)", "ML"),
        CatalogItem(CATEGORY_CABLING, "CABLE DE USO RUDO 3X16 (ML)", "ML"),
        CatalogItem(CATEGORY_CABLING, "CABLE UTP CAT 6 (ML)", "ML"),
        CatalogItem(CATEGORY_CABLING, "CONECTOR P/ FLEXIBLE", "PZA"),
        CatalogItem(CATEGORY_CABLING, "CONECTOR P/ LICUATITE", "PZA"),
        CatalogItem(CATEGORY_CABLING, 'FLEXIBLE 1/2" (ML)', 'ML'),
        CatalogItem(CATEGORY_CABLING, 'FLEXIBLE 3/4" (ML)', 'ML'),
        CatalogItem(CATEGORY_CABLING, "LICUATITE (ML)", "ML"),
        CatalogItem(CATEGORY_CABLING, "REGISTRO CON TAPA", "PZA"),
        CatalogItem(CATEGORY_CABLING, "ABRAZADERAS TIPO UÑA", "PZA"),
        # FUENTES
        CatalogItem(CATEGORY_POWER, "FUENTE DE ALIMENTACIÓN 10 AMP", "AL-1012-UL-ACM"),
        CatalogItem(CATEGORY_POWER, "FUENTE DE ALIMENTACIÓN 3 AMP", "SMP3"),
        CatalogItem(CATEGORY_POWER, "FUENTE DE ALIMENTACIÓN 5 AMP", "SMP5"),
        CatalogItem(CATEGORY_POWER, "FUENTE DE ALIMENTACIÓN 6 AMP", "AL600ULXB"),
    ],
    CLIENT_SANTANDER: [
        # ALARMAS
        CatalogItem(CATEGORY_ALARMS, "Panel de Alarma DMP", "XR550"),
        CatalogItem(CATEGORY_ALARMS, "Panel de Alarma Bosch", "B9512G"),
        CatalogItem(CATEGORY_ALARMS, "Tarjeta Módulo Expansor DMP", "716"),
        CatalogItem(CATEGORY_ALARMS, "Tarjeta Módulo Expansor DMP", "714"),
        CatalogItem(CATEGORY_ALARMS, "Tarjeta Expansor DMP", "711"),
        CatalogItem(CATEGORY_ALARMS, "Módulo Expansor de Zona DMP", "711S"),
        CatalogItem(CATEGORY_ALARMS, "Módulo de Rele DMP", "716"),
        CatalogItem(CATEGORY_ALARMS, "Teclado (Command Center) DMP", "P640HA"),
        CatalogItem(CATEGORY_ALARMS, "Command Center DMP Inalámbrico", "7060-W"),
        CatalogItem(CATEGORY_ALARMS, "Command Center Bosch", "B920"),
        CatalogItem(CATEGORY_ALARMS, "Command Center Bosch", "D1255B"),
        CatalogItem(CATEGORY_ALARMS, "Tarjeta Zonex Bosch", "B600"),
        CatalogItem(CATEGORY_ALARMS, "Octorelay Bosch", "B308"),
        CatalogItem(CATEGORY_ALARMS, "Tarjeta Popex Bosch", "D8125"),
        CatalogItem(CATEGORY_ALARMS, "Repetidor DMP", "1100R"),
        CatalogItem(CATEGORY_ALARMS, "Comunicador Celular DMP", "263LTE"),
        CatalogItem(CATEGORY_ALARMS, "Módulo Telefónico Bosch", "B430"),
        CatalogItem(CATEGORY_ALARMS, "Tarjeta Cell Bosch", "B443"),
        CatalogItem(CATEGORY_ALARMS, "Sensor de Movimiento (PIR) DMP", "1121 (DM 90)"),
        CatalogItem(CATEGORY_ALARMS, "Sensor de Movimiento (PIR) DMP", "1127 (DM 90)"),
        CatalogItem(CATEGORY_ALARMS, "Sensor de Movimiento (PIR) DMP", "1126 (DM 360)"),
        CatalogItem(CATEGORY_ALARMS, "Detector Movimiento Bosch", "DS936"),
        CatalogItem(CATEGORY_ALARMS, "Detector Movimiento Bosch", "ISC-PDL1-W18G"),
        CatalogItem(CATEGORY_ALARMS, "Detector Movimiento Interlogix", "6530UCM"),
        CatalogItem(CATEGORY_ALARMS, "Detector Movimiento Interlogix", "6550U"),
        CatalogItem(CATEGORY_ALARMS, "Detector Movimiento Sentrol", "RCR-C50"),
        CatalogItem(CATEGORY_ALARMS, "Detector Ruptura Cristal (DRC) DMP", "1128"),
        CatalogItem(CATEGORY_ALARMS, "DRC Interlogix", "5815-NT"),
        CatalogItem(CATEGORY_ALARMS, "DRC Interlogix", "R5815-NT"),
        CatalogItem(CATEGORY_ALARMS, "DRC Bosch", "DS1103i"),
        CatalogItem(CATEGORY_ALARMS, "Detector de Humo (DH) System Sensor", "C4-WB"),
        CatalogItem(CATEGORY_ALARMS, "Detector de Humo (DH) System Sensor", "1412A"),
        CatalogItem(CATEGORY_ALARMS, "Detector de Humo (DH) DMP", "1164"),
        CatalogItem(CATEGORY_ALARMS, "Detector de Temperatura (DT) DMP", "1115"),
        CatalogItem(CATEGORY_ALARMS, "Detector de Vibración (DV) Sentrol", "5402-W"),
        CatalogItem(CATEGORY_ALARMS, "Detector de Vibración (DV) Honeywell", "SC100"),
        CatalogItem(CATEGORY_ALARMS, "Contacto Magnético (CM) Interlogix", "1078C-N / 1085T-N"),
        CatalogItem(CATEGORY_ALARMS, "Contacto Magnético (CM) DMP", "1101/1106"),
        # ACCESO
        CatalogItem(CATEGORY_ACCESS, "Lector Wiegand DMP", "734"),
        CatalogItem(CATEGORY_ACCESS, "Lector Biométrico Spider", "3i SPIDER"),
        CatalogItem(CATEGORY_ACCESS, "Lector Biométrico Spider", "2e SPIDER"),
        CatalogItem(CATEGORY_ACCESS, "Accesor Nortek", "212ilw"),
        CatalogItem(CATEGORY_ACCESS, "Botón Pulsador de Salida DMP", "CM-30E"),
        CatalogItem(CATEGORY_ACCESS, "Botón de Pánico (B.A.) DMP", "1142 / 1148-G"),
        CatalogItem(CATEGORY_ACCESS, "Botón de Pánico Bosch", "RFPB-TB-A"),
        CatalogItem(CATEGORY_ACCESS, "Receptor Inalámbrico Bosch", "B810"),
        CatalogItem(CATEGORY_ACCESS, "Receptor (RX) Seco-Larm", "SK-910R4Q"),
        CatalogItem(CATEGORY_ACCESS, "Receptor (RX) Visonic", "MCR-304 / MCR-308"),
        CatalogItem(CATEGORY_ACCESS, "Cerradura Spider", "COM 102.0002 / PRO 102.0003"),
        CatalogItem(CATEGORY_ACCESS, "Cerradura Kaba", "252 P/CF / R100"),
        CatalogItem(CATEGORY_ACCESS, "Electroimán Seco-Larm", "E941SA"),
        CatalogItem(CATEGORY_ACCESS, "Electroimán Securitron", "M32"),
        CatalogItem(CATEGORY_ACCESS, "Contra Eléctrica Adams Rite", "7140-315"),
        CatalogItem(CATEGORY_ACCESS, "Interfón Aiphone", "LEF-3 / IE-1AD"),
        # CCTV
        CatalogItem(CATEGORY_CCTV, "DVR Scati", "SANM-W7E-X01-4TB"),
        CatalogItem(CATEGORY_CCTV, "NVR Scati", "SANM-W7E-X02-24TB"),
        CatalogItem(CATEGORY_CCTV, "NVR Scati Serie G400", "SANMJ24-W10-G516"),
        CatalogItem(CATEGORY_CCTV, "Disco Duro WD Purple", "WD30PURX (3TB)"),
        CatalogItem(CATEGORY_CCTV, "Cámara Bala Sony", "SSC-E473 / SSC-DC374"),
        CatalogItem(CATEGORY_CCTV, "Domo Bosch", "VDN5085V"),
        CatalogItem(CATEGORY_CCTV, "Domo Samsung", "SCV-3083N"),
        CatalogItem(CATEGORY_CCTV, "Domo Scati", "SIM-3511VR-XYMA"),
        CatalogItem(CATEGORY_CCTV, "Domo Scati 360", "SEM-3711NR-EAO"),
        CatalogItem(CATEGORY_CCTV, "Cámara Scati", "SDL-3501NR1-XA-FR"),
        # MISCELANEOS (Seguridad Fisica)
        CatalogItem(CATEGORY_MISC, "Caja Fuerte Tipo Ropero", "Mosler / Magnum / Armstrong / BTV"),
        CatalogItem(CATEGORY_MISC, "Caja de Transferencia", "BTV CEN4"),
        CatalogItem(CATEGORY_MISC, "Esclusa Unipersonal", "Curtisa CM96"),
        CatalogItem(CATEGORY_MISC, "Esclusa Cestek-Dimeyco", "EMD-U / EMD-2 / EMD-4"),
        CatalogItem(CATEGORY_MISC, "Puerta Blindada", "Cestek-Dimeyco ANTF / PCO-N2"),
        CatalogItem(CATEGORY_MISC, "Cierrapuertas Dorma", "7305 / TS COMPA"),
        CatalogItem(CATEGORY_MISC, "Cierrapuertas Phillips", "C-53 1404"),
        CatalogItem(CATEGORY_MISC, "Roto Transfer", "Cestek-Dimeyco RT-3"),
        # FUENTES / CABLEADO (Energía, Cables)
        CatalogItem(CATEGORY_POWER, "Fuente de Poder Altronix", "SMP-3 / SMP-5 / SMP7"),
        CatalogItem(CATEGORY_POWER, "Transformador DMP", "MGT1650"),
        CatalogItem(CATEGORY_POWER, "Batería 12V 7A", "Epcom / Genesis"),
        CatalogItem(CATEGORY_POWER, "Pilas de Litio", "CR2450, CR2032, CR2, 1/2AA"),
        CatalogItem(CATEGORY_CABLING, "Cable Coaxial", "Belden RG59"),
        CatalogItem(CATEGORY_CABLING, "Cable UTP", "Belden CAT6"),
        CatalogItem(CATEGORY_CABLING, "Cable Blindado", "Belden 2x22 / 4x22"),
        CatalogItem(CATEGORY_CABLING, "Cable Uso Rudo", "3x16"),
        CatalogItem(CATEGORY_CABLING, 'Tubería Flexible', 'Zapa (1", 3/4", 1/2", 3/8")'),
    ],
}


def default_catalog() -> dict[str, list[CatalogItem]]:
    """Fresh copy of the built-in catalog (callers may mutate it)."""
    return {client: list(items) for client, items in DEFAULT_DEVICE_CATALOG.items()}
