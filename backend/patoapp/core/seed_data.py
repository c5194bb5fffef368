"""Seed Data — default roster and catalog written on first run.

Invariants:
    - Seed ids are unique and non-empty
    - Roster holds one admin/paid and one user/free account
    - Accessors return deep copies; the module constants are never handed out

Design Decisions:
    - Plain dicts, not models: core stays free of pydantic, services validate on load
"""

import copy


DEFAULT_USERS: list[dict] = [
    {
        "id": "1",
        "first_name": "Juan",
        "last_name": "Pérez",
        "email": "juan@example.com",
        "username": "juanperez",
        "password": "123456",
        "role": "admin",
        "plan": "paid",
        "registered_on": "2024-01-15",
    },
    {
        "id": "2",
        "first_name": "María",
        "last_name": "González",
        "email": "maria@example.com",
        "username": "mariagonzalez",
        "password": "123456",
        "role": "user",
        "plan": "free",
        "registered_on": "2024-02-20",
    },
]

DEFAULT_PATOS: list[dict] = [
    {
        "id": "1",
        "name": "Pato Barcino",
        "scientific_name": "Anas flavirostris",
        "description": (
            "Pato de tamaño mediano, muy común en Argentina. Se caracteriza por "
            "su plumaje moteado y su adaptabilidad a diversos ambientes acuáticos."
        ),
        "behavior": (
            "Gregario, forma bandadas numerosas. Muy activo durante el amanecer "
            "y atardecer."
        ),
        "habitat": "Lagunas, esteros, ríos de corriente lenta y ambientes palustres",
        "plumage": "Dorso pardo moteado, vientre blanquecino con manchas oscuras, pico amarillo",
        "diet": "Omnívoro: semillas, plantas acuáticas, invertebrados",
        "group": "Anas",
        "image": "/placeholder.svg?height=300&width=400",
        "sound": "https://example.com/sounds/pato-barcino.mp3",
    },
    {
        "id": "2",
        "name": "Pato Sirirí Pampa",
        "scientific_name": "Dendrocygna viduata",
        "description": (
            "Pato silbador de aspecto elegante, con cuello largo y patas largas. "
            "Es una especie migratoria que visita Argentina."
        ),
        "behavior": (
            "Muy gregario, forma grandes bandadas. Emite silbidos característicos "
            "en vuelo."
        ),
        "habitat": "Lagunas profundas, esteros y humedales con vegetación abundante",
        "plumage": "Cabeza y cuello blancos con corona negra, dorso castaño, flancos rayados",
        "diet": "Principalmente vegetariano: semillas, brotes tiernos, algas",
        "group": "Dendrocygna",
        "image": "/placeholder.svg?height=300&width=400",
        "sound": "https://example.com/sounds/siriri-pampa.mp3",
    },
    {
        "id": "3",
        "name": "Pato Picazo",
        "scientific_name": "Netta peposaca",
        "description": (
            "Pato buceador robusto, endémico de Sudamérica. Los machos presentan "
            "un llamativo plumaje nupcial."
        ),
        "behavior": "Buceador experto, puede sumergirse hasta 3 metros de profundidad.",
        "habitat": "Lagunas profundas, embalses y grandes cuerpos de agua",
        "plumage": (
            "Macho: cabeza negra con reflejos verdes, pecho castaño. "
            "Hembra: parda con vientre claro"
        ),
        "diet": "Moluscos, crustáceos, plantas acuáticas sumergidas",
        "group": "Netta",
        "image": "/placeholder.svg?height=300&width=400",
        "sound": "https://example.com/sounds/pato-picazo.mp3",
    },
    {
        "id": "4",
        "name": "Pato Maicero",
        "scientific_name": "Anas georgica",
        "description": (
            "Pato de gran tamaño, común en la región patagónica y centro de "
            "Argentina. Muy adaptable a diferentes ambientes."
        ),
        "behavior": "Territorial durante la época reproductiva, forma parejas estables.",
        "habitat": "Lagos, lagunas, ríos y costas marinas",
        "plumage": "Plumaje general pardo con tonos rojizos, espejo alar verde brillante",
        "diet": "Omnívoro: vegetación acuática, invertebrados, pequeños peces",
        "group": "Anas",
        "image": "/placeholder.svg?height=300&width=400",
        "sound": "https://example.com/sounds/pato-maicero.mp3",
    },
    {
        "id": "5",
        "name": "Pato Cuchara",
        "scientific_name": "Spatula platalea",
        "description": (
            "Pato distintivo por su pico en forma de cuchara, utilizado para "
            "filtrar el agua en busca de alimento."
        ),
        "behavior": "Nada en círculos para crear corrientes que concentren el alimento.",
        "habitat": "Lagunas someras, bañados y humedales con agua poco profunda",
        "plumage": (
            "Macho: cabeza verde, pecho blanco, flancos castaños. "
            "Hembra: moteada en tonos pardos"
        ),
        "diet": "Filtrador: plancton, semillas pequeñas, invertebrados microscópicos",
        "group": "Spatula",
        "image": "/placeholder.svg?height=300&width=400",
        "sound": "https://example.com/sounds/pato-cuchara.mp3",
    },
]


def default_users() -> list[dict]:
    return copy.deepcopy(DEFAULT_USERS)


def default_patos() -> list[dict]:
    return copy.deepcopy(DEFAULT_PATOS)
