"""Color cycle: twelve fixed palettes, each active for 30 days."""

from __future__ import annotations

from xenft.engine.clock import SECONDS_PER_DAY, Instant, epoch_seconds
from xenft.models.theme import ColorScheme, Palette

CYCLE_DAYS = 30
CYCLE_COUNT = 12

PALETTES: tuple[Palette, ...] = (
    Palette("#FF5733", "#C70039", "#900C3F", "#1C0F13"),
    Palette("#33FF57", "#00C739", "#0C903F", "#0F1C13"),
    Palette("#3357FF", "#0039C7", "#0C0C90", "#0F131C"),
    Palette("#FF33F5", "#C700B9", "#900C84", "#1C0F1A"),
    Palette("#33FFF5", "#00C7B9", "#0C9084", "#0F1C1A"),
    Palette("#FFFF33", "#C7C700", "#909000", "#1C1C0F"),
    Palette("#FF8333", "#C75200", "#903C00", "#1C150F"),
    Palette("#FF3383", "#C70052", "#90003C", "#1C0F15"),
    Palette("#83FF33", "#52C700", "#3C9000", "#151C0F"),
    Palette("#8333FF", "#5200C7", "#3C0090", "#150F1C"),
    Palette("#33FFFF", "#00C7C7", "#009090", "#0F1C1C"),
    Palette("#FF3333", "#C70000", "#900000", "#1C0F0F"),
)


def current_scheme(now: Instant = None) -> ColorScheme:
    """Scheme active at ``now``.

    ``days_until_next_cycle`` is in [1, 30]: on the first day of a cycle it
    reads 30, never 0.
    """
    days_since_epoch = epoch_seconds(now) // SECONDS_PER_DAY
    cycle_index = (days_since_epoch // CYCLE_DAYS) % CYCLE_COUNT
    return ColorScheme(
        palette=PALETTES[cycle_index],
        cycle_index=cycle_index,
        days_until_next_cycle=CYCLE_DAYS - (days_since_epoch % CYCLE_DAYS),
    )
