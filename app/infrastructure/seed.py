"""Demo data set loaded at startup when ``SEED_DEMO_DATA`` is enabled."""

import structlog

from app.application.services.auth_service import hash_password
from app.config import get_settings
from app.domain.models.assignment import ASSIGNED, RETIRED
from app.domain.models.status_record import CensusState

logger = structlog.get_logger(__name__)

# nombre, email, telefono, direccion, activo
CLIENTS = [
    ("Juan Pérez", "juan@email.com", "0981-123456", "Asunción", True),
    ("María García", "maria@email.com", "0984-654321", "Luque", True),
    ("Carlos López", "carlos@email.com", "0985-789123", "San Lorenzo", True),
    ("Ana Torres", "ana@email.com", "0971-222333", "Fernando de la Mora", True),
    ("Luis González", "luis@email.com", "0972-444555", "Lambaré", False),
    ("Marta Rivas", "marta@email.com", "0961-666777", "Encarnación", True),
    ("Diego Silva", "diego@email.com", "0962-888999", "Capiatá", True),
    ("Lucía Benítez", "lucia@email.com", "0983-121314", "Itauguá", True),
    ("Pedro Duarte", "pedro@email.com", "0986-151617", "Villa Elisa", True),
    ("Gabriela Fernández", "gaby@email.com", "0973-181920", "Ñemby", True),
    ("Rodrigo Medina", "rodrigo@email.com", "0963-212223", "Caacupé", False),
    ("Camila Ortiz", "camila@email.com", "0974-242526", "Coronel Oviedo", True),
    ("Santiago Cabrera", "santiago@email.com", "0964-272829", "Paraguarí", True),
    ("Patricia Villalba", "patricia@email.com", "0987-303132", "Ciudad del Este", True),
    ("Hugo Ramírez", "hugo@email.com", "0975-333444", "Areguá", True),
]

# cod_barras, marca, modelo, tipo_equipo
EQUIPMENT = [
    ("REF001", "Samsung", "RT38K5932SL", "Refrigerador No Frost"),
    ("REF002", "LG", "GS65SPP1", "Refrigerador Side by Side"),
    ("REF003", "Whirlpool", "WRM35AKTWW", "Refrigerador Convencional"),
    ("REF004", "Electrolux", "DF35", "Freezer Vertical"),
    ("REF005", "Panasonic", "NR-BL389", "Refrigerador Inverter"),
    ("REF006", "Midea", "HS-384", "Freezer Horizontal"),
    ("REF007", "Bosch", "KSV36VI3P", "Refrigerador Inteligente"),
    ("REF008", "Daewoo", "FRS-U20", "Refrigerador Side by Side"),
    ("REF009", "GE", "GTS18", "Refrigerador Convencional"),
    ("REF010", "Sharp", "SJ-FS85", "Refrigerador No Frost"),
    ("REF011", "Samsung", "RB29HSR2DWW", "Refrigerador Inverter"),
    ("REF012", "LG", "GC-X247", "Refrigerador Door-in-Door"),
    ("REF013", "Whirlpool", "WRF535SMHZ", "French Door"),
    ("REF014", "Electrolux", "TF39", "Refrigerador Convencional"),
    ("REF015", "Panasonic", "NR-BY602", "Refrigerador No Frost"),
]

LOGOS = ["Sin logo", "Coca-Cola", "Pepsi", "Pilsen", "Brahma"]

# nombre, email, contraseña, rol
USERS = [
    ("Admin", "admin@sistema.com", "admin123", "administrador"),
    ("Técnico 1", "tecnico1@sistema.com", "tec123", "tecnico"),
    ("Técnico 2", "tecnico2@sistema.com", "tec234", "tecnico"),
    ("Técnico 3", "tecnico3@sistema.com", "tec345", "tecnico"),
    ("Supervisor", "supervisor@sistema.com", "sup123", "supervisor"),
    ("Gerente", "gerente@sistema.com", "ger123", "administrador"),
    ("Operador 1", "operador1@sistema.com", "ope123", "operador"),
    ("Operador 2", "operador2@sistema.com", "ope234", "operador"),
    ("Operador 3", "operador3@sistema.com", "ope345", "operador"),
    ("Supervisor 2", "supervisor2@sistema.com", "sup234", "supervisor"),
    ("Soporte 1", "soporte1@sistema.com", "sop123", "soporte"),
    ("Soporte 2", "soporte2@sistema.com", "sop234", "soporte"),
    ("Invitado", "invitado@sistema.com", "inv123", "invitado"),
    ("Auditor", "auditor@sistema.com", "aud123", "auditor"),
    ("Root", "root@sistema.com", "root123", "administrador"),
]

# Unit N sits at client N; the assignments of units 5 and 11 are retired.
INACTIVE_ASSIGNMENTS = {5, 11}

# funcionando, estado_general, temperatura_actual, temperatura_freezer, latitud, longitud
STATUS = [
    (True, "Funcionando correctamente", 4.2, -18.5, -25.2637, -57.5759),
    (False, "Problema de temperatura", 8.5, -12.0, -25.2800, -57.6300),
    (True, "Óptimas condiciones", 3.9, -19.1, -25.3100, -57.6000),
    (True, "Funcionando estable", 5.0, -17.0, -25.2950, -57.5800),
    (False, "Apagado por cliente", None, None, -25.3200, -57.6100),
    (True, "Sin anomalías", 4.5, -18.2, -25.2805, -57.5990),
    (True, "Correcto funcionamiento", 4.0, -18.0, -25.2700, -57.5900),
    (False, "Compresor con fallas", 10.0, -8.0, -25.2650, -57.5850),
    (True, "Revisión completa", 3.5, -19.0, -25.2750, -57.5950),
    (True, "Operativo", 4.1, -18.4, -25.2600, -57.5700),
    (False, "Falla eléctrica", None, None, -25.2850, -57.6000),
    (True, "Sistema normal", 3.8, -19.2, -25.2955, -57.6020),
    (True, "Temperatura estable", 4.3, -18.3, -25.2990, -57.6050),
    (False, "Pérdida de gas refrigerante", 12.0, -5.0, -25.3010, -57.6070),
    (True, "Sin observaciones", 4.0, -18.0, -25.3050, -57.6090),
]


def seed_catalog(store) -> None:
    for _, marca, modelo, _ in EQUIPMENT:
        brand = store.brands.find_by_name(marca) or store.brands.create({"nombre": marca})
        if not store.models.find_by_name(modelo, marca_id=brand.id):
            store.models.create({"nombre": modelo, "marca_id": brand.id})
    for nombre in LOGOS:
        store.logos.create({"nombre": nombre})


def seed_store(store) -> None:
    """Load the demo collections through the regular ``create`` path."""
    seed_catalog(store)

    for nombre, email, telefono, direccion, activo in CLIENTS:
        store.clients.create(
            {"nombre": nombre, "email": email, "telefono": telefono, "direccion": direccion, "activo": activo}
        )

    for cod_barras, marca, modelo, tipo_equipo in EQUIPMENT:
        brand = store.brands.find_by_name(marca)
        model = store.models.find_by_name(modelo, marca_id=brand.id)
        store.equipment.create(
            {
                "cod_barras": cod_barras,
                "marca": marca,
                "modelo": modelo,
                "tipo_equipo": tipo_equipo,
                "marca_id": brand.id,
                "modelo_id": model.id,
            }
        )

    for nombre, email, password, rol in USERS:
        store.users.create(
            {"nombre": nombre, "email": email, "password_hash": hash_password(password), "rol": rol}
        )

    for n, (funcionando, estado_general, temp, temp_freezer, lat, lng) in enumerate(STATUS, start=1):
        active = n not in INACTIVE_ASSIGNMENTS
        assignment = store.assignments.create(
            {
                "equipo_id": n,
                "cliente_id": n,
                "usuario_id": n,
                "activo": active,
                "estado": ASSIGNED if active else RETIRED,
            }
        )
        store.status_records.create(
            {
                "asignacion_id": assignment.id,
                "equipo_id": n,
                "cliente_id": n,
                "usuario_id": n,
                "funcionando": funcionando,
                "estado_general": estado_general,
                "temperatura_actual": temp,
                "temperatura_freezer": temp_freezer,
                "latitud": lat,
                "longitud": lng,
                "synced": True,
                "census_state": CensusState.MIGRATED,
            }
        )

    logger.info(
        "Demo data loaded",
        clientes=store.clients.count(),
        equipos=store.equipment.count(),
        usuarios=store.users.count(),
        timezone=get_settings().TIMEZONE,
    )
