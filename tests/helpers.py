"""
Record builders shared by the test modules.
"""

from catalog.models import Record
from catalog.traits import extract_traits

# Keyword-friendly names for trait types with spaces
_KWARG_TRAITS = {
    'FacialHair': 'Facial Hair',
    'MShadows': 'M. Shadows',
    'ZackyVengeance': 'Zacky Vengeance',
}


def build_test_record(token_id, attributes=None, **traits):
    """
    Build a Record the way the loader does.

    build_test_record(1, Mask="Red", FacialHair="Goatee")
    build_test_record(2, attributes=[("Mask", "Red"), ("Mask", "Blue")])
    """
    pairs = list(attributes or [])
    for key, value in traits.items():
        pairs.append((_KWARG_TRAITS.get(key, key), value))
    pairs = tuple(pairs)
    return Record(
        token_id=token_id,
        name=f"Deathbat #{token_id}",
        attributes=pairs,
        traits=extract_traits(pairs, token_id),
        hyperlink=f"https://opensea.io/assets/0xtest/{token_id}",
    )
