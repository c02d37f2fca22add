"""
Field-name translation between persisted records and the API.

Records are stored with English column names (``driverNumber``) while the
API speaks Norwegian (``sjåforNummer``). Each entity kind owns a fixed table
of field pairs; translation in either direction is a pure function of the
record and that table.

Some persisted names are already Norwegian (``antTurer``, ``kmOpptatt``,
``tipsKontant``, ``tipsKreditt``, ``netto``, ``loyve``) and map to themselves.
"""
from enum import Enum
from typing import Any, Mapping, NamedTuple


class EntityKind(str, Enum):
    """Entity kinds that have a Norwegian API shape."""
    DRIVER = "driver"
    CAR = "car"
    SKIFT = "skift"


class FieldPair(NamedTuple):
    """One persisted (internal) name and its API (external) name."""
    internal: str
    external: str


class Relation(NamedTuple):
    """A nested record translated with the mapping of another kind."""
    internal: str
    external: str
    kind: EntityKind


DRIVER_FIELDS: tuple[FieldPair, ...] = (
    FieldPair("driverNumber", "sjåforNummer"),
    FieldPair("personNumber", "personNummer"),
    FieldPair("name", "fornavn"),
    FieldPair("lastName", "etternavn"),
    FieldPair("address", "adresse"),
    FieldPair("town", "by"),
    FieldPair("postalCode", "postnummer"),
    FieldPair("telephone", "telefon"),
    FieldPair("email", "epost"),
    FieldPair("salaryPercentage", "lonnprosent"),
    FieldPair("hideFromOthers", "ikkeVisMegForAndre"),
    FieldPair("createdAt", "opprettet"),
    FieldPair("updatedAt", "oppdatert"),
)

CAR_FIELDS: tuple[FieldPair, ...] = (
    FieldPair("licenseNumber", "skiltNummer"),
    FieldPair("carBrand", "bilmerke"),
    FieldPair("modelYear", "arsmodell"),
    FieldPair("createdAt", "opprettet"),
    FieldPair("updatedAt", "oppdatert"),
)

SKIFT_FIELDS: tuple[FieldPair, ...] = (
    FieldPair("skiftNumber", "skiftNummer"),
    FieldPair("kmBetweenSkift", "kmMellomSkift"),
    FieldPair("startDate", "startDato"),
    FieldPair("stopDate", "sluttDato"),
    FieldPair("startTime", "startTid"),
    FieldPair("stopTime", "sluttTid"),
    FieldPair("salaryBasis", "lonnBasis"),
    FieldPair("startKm", "startKm"),
    FieldPair("stopKm", "sluttKm"),
    FieldPair("totalKm", "totalKm"),
    FieldPair("antTurer", "antTurer"),
    FieldPair("kmOpptatt", "kmOpptatt"),
    FieldPair("tipsKontant", "tipsKontant"),
    FieldPair("tipsKreditt", "tipsKreditt"),
    FieldPair("netto", "netto"),
    FieldPair("loyve", "loyve"),
    FieldPair("driverId", "sjåforId"),
    FieldPair("carId", "bilId"),
    FieldPair("createdAt", "opprettet"),
    FieldPair("updatedAt", "oppdatert"),
)

FIELD_PAIRS: dict[EntityKind, tuple[FieldPair, ...]] = {
    EntityKind.DRIVER: DRIVER_FIELDS,
    EntityKind.CAR: CAR_FIELDS,
    EntityKind.SKIFT: SKIFT_FIELDS,
}

RELATIONS: dict[EntityKind, tuple[Relation, ...]] = {
    EntityKind.DRIVER: (Relation("skifts", "skifts", EntityKind.SKIFT),),
    EntityKind.CAR: (Relation("skifts", "skifts", EntityKind.SKIFT),),
    EntityKind.SKIFT: (
        Relation("driver", "driver", EntityKind.DRIVER),
        Relation("car", "car", EntityKind.CAR),
    ),
}

ID_FIELD = "id"


def _check_bijection(kind: EntityKind, pairs: tuple[FieldPair, ...]) -> None:
    internal = [pair.internal for pair in pairs]
    external = [pair.external for pair in pairs]
    if len(set(internal)) != len(internal) or len(set(external)) != len(external):
        raise ValueError(f"Field mapping for {kind.value} is not one-to-one")


for _kind, _pairs in FIELD_PAIRS.items():
    _check_bijection(_kind, _pairs)


def _translate_nested(value: Any, kind: EntityKind, to_external_keys: bool) -> Any:
    translate = to_external if to_external_keys else to_internal
    if isinstance(value, (list, tuple)):
        return [translate(item, kind) for item in value]
    return translate(value, kind)


def to_external(record: Mapping[str, Any], kind: EntityKind) -> dict[str, Any]:
    """
    Translate a persisted record to its Norwegian API shape.

    Unmapped keys are dropped, ``id`` is always copied and nested relations
    (a shift's driver and car, a driver's or car's shifts) are translated
    with their own kind's mapping.

    Example:
        >>> to_external({"id": 1, "driverNumber": "DRV001"}, EntityKind.DRIVER)
        {'id': 1, 'sjåforNummer': 'DRV001'}
    """
    mapped: dict[str, Any] = {}
    if ID_FIELD in record:
        mapped[ID_FIELD] = record[ID_FIELD]

    for pair in FIELD_PAIRS[kind]:
        if pair.internal in record:
            mapped[pair.external] = record[pair.internal]

    for relation in RELATIONS[kind]:
        nested = record.get(relation.internal)
        if nested is not None:
            mapped[relation.external] = _translate_nested(nested, relation.kind, True)

    return mapped


def to_internal(record: Mapping[str, Any], kind: EntityKind) -> dict[str, Any]:
    """Translate a Norwegian API record back to persisted names.

    Inverse of :func:`to_external`.
    """
    mapped: dict[str, Any] = {}
    if ID_FIELD in record:
        mapped[ID_FIELD] = record[ID_FIELD]

    for pair in FIELD_PAIRS[kind]:
        if pair.external in record:
            mapped[pair.internal] = record[pair.external]

    for relation in RELATIONS[kind]:
        nested = record.get(relation.external)
        if nested is not None:
            mapped[relation.internal] = _translate_nested(nested, relation.kind, False)

    return mapped
