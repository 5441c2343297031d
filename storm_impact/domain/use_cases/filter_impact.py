"""Impact filter applied before damages are normalized."""

from ..entities.raw_record import RawRecord


def has_impact(record: RawRecord) -> bool:
    """
    True if any impact measure is positive.

    Damage bases are checked before their exponent is applied, so a record
    with base 0 is dropped whatever its exponent code.
    """
    return (
        record.fatalities > 0
        or record.injuries > 0
        or record.crop_damage > 0
        or record.property_damage > 0
    )

