"""
Pass-through iCalendar properties.

Properties that the item model does not handle (X- properties, ATTENDEE,
CATEGORIES...) are kept verbatim so they survive a round trip to the server.
"""

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class ExtraProperty:
    """
    An iCalendar property kept as-is.

    Attributes:
        name: Property name, e.g. ``X-CUSTOM``
        value: Raw property value, None if the property had none
        params: Parameter name -> parameter values, in their original order
    """
    name: str
    value: Optional[str] = None
    params: dict[str, list[str]] = field(default_factory=dict)

    def __post_init__(self):
        # A single parameter value may be given as a bare string
        self.params = {
            key: [values] if isinstance(values, str) else list(values)
            for key, values in self.params.items()
        }

    @classmethod
    def from_icalendar(cls, name: str, value: Any) -> 'ExtraProperty':
        """
        Create from a property value parsed by the icalendar library.

        Args:
            name: The property name as found in the component
            value: The icalendar property object (vText, vCalAddress...)

        Returns:
            An ExtraProperty holding the wire form of the value.
        """
        if hasattr(value, 'to_ical'):
            raw = value.to_ical()
            raw_value = raw.decode('utf-8') if isinstance(raw, bytes) else str(raw)
        else:
            raw_value = None if value is None else str(value)

        params = {}
        for key, values in getattr(value, 'params', {}).items():
            params[key] = [str(v) for v in values] if isinstance(values, (list, tuple)) else [str(values)]

        return cls(name=name.upper(), value=raw_value, params=params)
