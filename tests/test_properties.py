"""Unit tests for pass-through properties."""
from icalendar import Calendar as ICalCalendar
from icalendar.prop import vText

from calitems.properties import ExtraProperty


class TestExtraProperty:
    """Test cases for ExtraProperty."""

    def test_bare_string_parameter(self):
        """Test that a single parameter value may be given as a string."""
        prop = ExtraProperty("X-A", "1", {"LANGUAGE": "en"})
        assert prop.params == {"LANGUAGE": ["en"]}

    def test_parameter_order_kept(self):
        prop = ExtraProperty("X-A", None, {"Z": ["1"], "A": ["2"], "M": ["3"]})
        assert list(prop.params) == ["Z", "A", "M"]

    def test_from_icalendar_value(self):
        """Test conversion of a value object built with the icalendar library."""
        value = vText("val")
        value.params["PARAM"] = ["a", "b"]

        prop = ExtraProperty.from_icalendar("x-custom", value)

        assert prop == ExtraProperty("X-CUSTOM", "val", {"PARAM": ["a", "b"]})

    def test_from_parsed_component(self):
        """Test collecting unknown properties of a parsed VTODO."""
        calendar = ICalCalendar.from_ical(
            "BEGIN:VCALENDAR\r\n"
            "VERSION:2.0\r\n"
            "PRODID:-//Other//Producer//EN\r\n"
            "BEGIN:VTODO\r\n"
            "UID:t1\r\n"
            "SUMMARY:Buy milk\r\n"
            "X-APPLE-SORT-ORDER;X-P=1:42\r\n"
            "END:VTODO\r\n"
            "END:VCALENDAR\r\n"
        )
        todo = calendar.walk("VTODO")[0]

        prop = ExtraProperty.from_icalendar("X-APPLE-SORT-ORDER", todo["X-APPLE-SORT-ORDER"])

        assert prop.name == "X-APPLE-SORT-ORDER"
        assert prop.value == "42"
        assert prop.params == {"X-P": ["1"]}
