"""
Plain-text rendering of records and twin matches for the command line.
"""

from catalog.enrichment import UNKNOWN_OWNER
from catalog.matching import TwinMatch
from catalog.models import Record


def format_record(record: Record) -> str:
    """
    Render a record as:

        Deathbat #<id>
        <Trait: Value, Trait: Value, ...>
        Owner: <owner>
        OpenSea.io link: <hyperlink>
    """
    traits = ", ".join(f"{trait_type}: {value}" for trait_type, value in record.attributes)
    owner = record.owner or UNKNOWN_OWNER
    return (
        f"Deathbat #{record.token_id}\n"
        f"{traits}\n"
        f"Owner: {owner}\n"
        f"OpenSea.io link: {record.hyperlink}"
    )


def format_match(match: TwinMatch) -> str:
    lines = ["SOURCE", format_record(match.source), ""]

    if match.no_twin:
        signature = match.source.traits.signature
        lines.append(f"Deathbat #{match.source.token_id} is a 1/1 ({signature}) and has no twin.")
    else:
        lines.append(f"TWIN (score {match.score})")
        lines.append(format_record(match.twin))

    return "\n".join(lines)
