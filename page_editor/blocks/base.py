"""
Base des props de blocs.

Chaque type de bloc déclare un modèle de props : l'ensemble des clés reconnues
et la valeur de repli de chacune au rendu. Les props stockées ne sont jamais
réécrites — le modèle sert uniquement à les lire (coerce_props).
"""
import logging
from typing import Annotated, Any, Mapping, Type, TypeVar

from pydantic import AfterValidator, BaseModel, ConfigDict, ValidationError
from pydantic.alias_generators import to_camel

log = logging.getLogger(__name__)

GRID_COLUMNS_MIN = 1
GRID_COLUMNS_MAX = 4


def clamp(value, lo, hi):
    return max(lo, min(hi, value))


def _clamp_grid_columns(value: int) -> int:
    return clamp(value, GRID_COLUMNS_MIN, GRID_COLUMNS_MAX)


def _clamp_unit(value: float) -> float:
    return clamp(value, 0.0, 1.0)


# Nombre de colonnes d'une grille : ramené dans 1..4 au rendu
GridColumns = Annotated[int, AfterValidator(_clamp_grid_columns)]
# Opacité / ratio : ramené dans 0..1
UnitFloat = Annotated[float, AfterValidator(_clamp_unit)]


class BlockProps(BaseModel):
    """Props d'un bloc (lecture tolérante, clés camelCase côté JSON)."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")


class PropsItem(BaseModel):
    """Élément de liste dans des props (feature, image, témoignage…)."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")


P = TypeVar("P", bound=BaseModel)


def coerce_props(model: Type[P], raw: Any) -> P:
    """
    Lit un sac de props avec le modèle donné.

    Clé absente → valeur par défaut du modèle.
    Clé invalide (mauvais type, enum inconnu) → retirée puis valeur par défaut.
    Ne lève jamais : un document corrompu doit rester rendable.
    """
    data = dict(raw) if isinstance(raw, Mapping) else {}
    names_by_alias = {f.alias or name: name for name, f in model.model_fields.items()}

    for _ in range(len(data) + 1):
        try:
            return model.model_validate(data)
        except ValidationError as exc:
            bad = {err["loc"][0] for err in exc.errors() if err.get("loc")}
            dropped = False
            for key in bad:
                for candidate in (key, names_by_alias.get(key)):
                    if candidate is not None and candidate in data:
                        data.pop(candidate)
                        dropped = True
            if not dropped:
                break
            log.debug("%s : props invalides ignorées %s", model.__name__, sorted(map(str, bad)))
    return model()
