# models/player.py - Modelos de datos de jugadores y estadísticas
# Formato JSON compatible con el catálogo público de jugadores (headtohead.json)

import math
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

# Codificación de resultados recientes: 1 = victoria, 0 = derrota
WIN = 1
LOSS = 0


def is_number(value) -> bool:
    """int o float, sin contar los booleanos."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def integral_value(name: str, value: Any) -> int:
    """
    Entero exacto para campos como id o rank.

    Acepta floats sin parte decimal (52.0); 52.9 o "52" se rechazan.

    Raises:
        TypeError: si el valor no es un entero
    """
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} debe ser un entero, recibido {value!r}")
    return value


def optional_number(name: str, value: Any) -> Optional[float]:
    """Número o None (dato ausente)."""
    if value is not None and not is_number(value):
        raise TypeError(f"{name} debe ser numérico, recibido {value!r}")
    return value


@dataclass(frozen=True)
class Country:
    """País del jugador: código ISO y bandera."""
    code: str
    picture: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Country":
        return cls(code=data['code'], picture=data.get('picture'))

    def to_dict(self) -> Dict[str, Any]:
        return {'code': self.code, 'picture': self.picture}


@dataclass(frozen=True)
class PlayerStats:
    """
    Datos deportivos y físicos de un jugador.

    weight está en gramos y height en centímetros, tal como vienen del
    catálogo. last guarda los últimos resultados (1 = ganó, 0 = perdió).
    """
    rank: int
    points: int = 0
    weight: Optional[float] = None
    height: Optional[float] = None
    age: Optional[int] = None
    last: Tuple[Any, ...] = field(default_factory=tuple)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PlayerStats":
        return cls(
            rank=integral_value('rank', data['rank']),
            points=data.get('points', 0),
            weight=optional_number('weight', data.get('weight')),
            height=optional_number('height', data.get('height')),
            age=data.get('age'),
            last=tuple(data.get('last') or ()),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'rank': self.rank,
            'points': self.points,
            'weight': self.weight,
            'height': self.height,
            'age': self.age,
            'last': list(self.last),
        }


@dataclass(frozen=True)
class PlayerRecord:
    """Jugador del catálogo. Inmutable: el motor de estadísticas solo lo lee."""
    id: int
    firstname: str
    lastname: str
    shortname: str
    sex: str
    country: Country
    picture: Optional[str]
    data: PlayerStats

    @property
    def full_name(self) -> str:
        return f"{self.firstname} {self.lastname}"

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PlayerRecord":
        """
        Construir un PlayerRecord desde el diccionario JSON del catálogo.

        Raises:
            KeyError: si falta un campo obligatorio
            TypeError: si country o data no son diccionarios, si id o rank no
                son enteros o si weight o height no son numéricos
        """
        return cls(
            id=integral_value('id', data['id']),
            firstname=data['firstname'],
            lastname=data['lastname'],
            shortname=data.get('shortname', ''),
            sex=data.get('sex', ''),
            country=Country.from_dict(data['country']),
            picture=data.get('picture'),
            data=PlayerStats.from_dict(data['data']),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'firstname': self.firstname,
            'lastname': self.lastname,
            'shortname': self.shortname,
            'sex': self.sex,
            'country': self.country.to_dict(),
            'picture': self.picture,
            'data': self.data.to_dict(),
        }


@dataclass
class CountryAggregate:
    """Acumulado de resultados por país (efímero, se crea en cada cálculo)."""
    country: str
    total_win: int = 0
    total_lost: int = 0

    @property
    def win_ratio(self) -> float:
        """(victorias - derrotas) / (victorias + derrotas), -inf si no hay partidos decididos."""
        played = self.total_win + self.total_lost
        if played == 0:
            return -math.inf
        return (self.total_win - self.total_lost) / played


@dataclass(frozen=True)
class StatisticsResult:
    """Resultado público de las estadísticas globales."""
    country: str
    mean_body_mass_index: float
    median_player_height: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            'country': self.country,
            'meanBodyMassIndex': self.mean_body_mass_index,
            'medianPlayerHeight': self.median_player_height,
        }


def players_from_dicts(items: List[Dict[str, Any]]) -> List[PlayerRecord]:
    """Convertir una lista de diccionarios JSON en PlayerRecords."""
    return [PlayerRecord.from_dict(item) for item in items]
