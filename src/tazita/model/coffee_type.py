# SPDX-License-Identifier: MIT

from typing import Literal, Optional, TypedDict, get_args

CoffeeType = Literal[
    "instantaneo",
    "capsula",
    "expresso",
    "especialidad",
    "cafe_frio",
    "starbucks",
    "filtrado",
]

COFFEE_TYPE_IDS: tuple[CoffeeType, ...] = get_args(CoffeeType)
DEFAULT_COFFEE_TYPE: CoffeeType = COFFEE_TYPE_IDS[0]


class CoffeeTypeInfo(TypedDict):
    id: CoffeeType
    name: str
    emoji: str
    color: str
    description: str


COFFEE_TYPES: list[CoffeeTypeInfo] = [
    {
        "id": "instantaneo",
        "name": "Instantáneo",
        "emoji": "☕",
        "color": "#D4A574",
        "description": "Café soluble rápido",
    },
    {
        "id": "capsula",
        "name": "Cápsula",
        "emoji": "💊",
        "color": "#8B6F47",
        "description": "Nespresso, Dolce Gusto, etc.",
    },
    {
        "id": "expresso",
        "name": "Expresso",
        "emoji": "☕",
        "color": "#5C4A3A",
        "description": "Café expresso tradicional",
    },
    {
        "id": "especialidad",
        "name": "Especialidad",
        "emoji": "✨",
        "color": "#FFD1DC",
        "description": "Café de especialidad, V60, Chemex",
    },
    {
        "id": "cafe_frio",
        "name": "Café Frío",
        "emoji": "🧊",
        "color": "#A8D8EA",
        "description": "Cold brew, iced coffee",
    },
    {
        "id": "starbucks",
        "name": "Starbucks",
        "emoji": "🥤",
        "color": "#00704A",
        "description": "Cualquier bebida de Starbucks",
    },
    {
        "id": "filtrado",
        "name": "Café Filtrado",
        "emoji": "🫗",
        "color": "#C4A77D",
        "description": "V60, Chemex, Kalita, etc.",
    },
]


def is_coffee_type(value: Optional[str]) -> bool:
    return value in COFFEE_TYPE_IDS


def normalize_coffee_type(value: Optional[str]) -> CoffeeType:
    """Unknown or missing types count toward the default category."""
    if value is not None and value in COFFEE_TYPE_IDS:
        return value  # type: ignore[return-value]
    return DEFAULT_COFFEE_TYPE


def get_coffee_type_info(value: Optional[str]) -> CoffeeTypeInfo:
    for info in COFFEE_TYPES:
        if info["id"] == value:
            return info
    return COFFEE_TYPES[0]
