"""JSON file writer for calendar files."""

from pathlib import Path

from vcal.models.component import VObject
from vcal.output.base import write_bytes


class JSONWriter:
    """Writer for JSON calendar files."""

    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding

    def write(self, calendar: VObject, path: Path) -> None:
        """Write calendar to JSON file."""
        # Use Pydantic's JSON serialization of the component tree
        json_str = calendar.to_data().model_dump_json(indent=2)
        write_bytes(json_str.encode(self.encoding), path)

    def get_extension(self) -> str:
        """Returns file extension."""
        return "json"
