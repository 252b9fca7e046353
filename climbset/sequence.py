"""Per-hold step numbering for sequence display."""

from climbset.models import HoldSet


def enable_sequence(holds: HoldSet) -> HoldSet:
    """Number every unsequenced hold by its 1-based position.

    Holds that already carry a sequence number keep it.
    """
    return tuple(
        hold if hold.sequence is not None else hold.replace(sequence=position)
        for position, hold in enumerate(holds, start=1)
    )


def disable_sequence(holds: HoldSet) -> HoldSet:
    """Clear the sequence number of every hold."""
    return tuple(
        hold if hold.sequence is None else hold.replace(sequence=None)
        for hold in holds
    )


def toggle_sequencing(holds: HoldSet, enable: bool) -> HoldSet:
    """Enable or disable sequence numbering on all holds."""
    return enable_sequence(holds) if enable else disable_sequence(holds)
