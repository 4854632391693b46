"""Address text normalization shared by the resolver and the favorites recorder."""
from location_finder.core.constants import COORDINATE_DECIMALS


def address_key(address: str | None) -> str:
    """
    Canonical matching key for an address: lowercase, trimmed, inner whitespace collapsed.
    "  Paris,   FRANCE " and "paris, france" share one key.
    """
    if not address:
        return ""
    return " ".join(address.lower().split())


def coordinate_label(latitude: float, longitude: float) -> str:
    """Stringified coordinate pair used as the address of a point picked on the map."""
    return f"{latitude:.{COORDINATE_DECIMALS}f}, {longitude:.{COORDINATE_DECIMALS}f}"
