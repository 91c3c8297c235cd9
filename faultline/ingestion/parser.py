"""
Request sequence parser for Faultline.

Reads YAML files describing the requests to feed through the simulation.
A file is either a bare list of payloads or a mapping with a ``requests``
list; ``null`` entries are missing requests.
"""

import yaml
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union
import logging

from faultline.core.errors import SequenceParseError
from faultline.core.models.request import RequestUnit

logger = logging.getLogger(__name__)


@dataclass
class ParsedSequence:
    """A request sequence loaded from disk."""
    name: str
    requests: List[RequestUnit] = field(default_factory=list)
    failure_rate: Optional[float] = None
    source: Optional[Path] = None

    @property
    def missing_count(self) -> int:
        return sum(1 for request in self.requests if not request.is_present)


class SequenceParser:
    """Parse request sequences from YAML into request units."""

    # Common field variations we'll recognize
    FIELD_MAPPINGS = {
        "requests": ["requests", "sequence", "payloads"],
        "failure_rate": ["failure_rate", "lambda", "rate"],
        "name": ["name", "scenario", "title"],
    }

    def __init__(self):
        """Initialize the parser."""
        self.warnings: List[str] = []

    def parse(self, sequence_path: Union[str, Path]) -> ParsedSequence:
        """
        Parse a request sequence from a YAML file.

        Args:
            sequence_path: Path to the YAML sequence file

        Returns:
            The parsed sequence

        Raises:
            FileNotFoundError: If the file doesn't exist
            SequenceParseError: If the file is not a valid sequence
        """
        sequence_path = Path(sequence_path)
        if not sequence_path.exists():
            raise FileNotFoundError(f"Sequence file not found: {sequence_path}")

        try:
            with open(sequence_path, 'r', encoding='utf-8') as f:
                raw = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise SequenceParseError(f"Invalid YAML format: {e}") from e
        except UnicodeDecodeError as e:
            raise SequenceParseError(f"Sequence file is not valid UTF-8: {e}") from e

        parsed = self.parse_data(raw, default_name=sequence_path.stem)
        parsed.source = sequence_path
        return parsed

    def parse_data(self, raw: Any, default_name: str = "custom") -> ParsedSequence:
        """Parse an already-loaded YAML document."""
        self.warnings = []

        if isinstance(raw, list):
            document: Dict[str, Any] = {"requests": raw}
        elif isinstance(raw, dict):
            document = self._normalize_fields(raw)
        else:
            raise SequenceParseError("Sequence must be a YAML list or a mapping with a 'requests' list")

        entries = document.get("requests")
        if not isinstance(entries, list):
            raise SequenceParseError("'requests' must be a list")
        if not entries:
            raise SequenceParseError("Sequence must contain at least one request")

        requests = [self._to_request(entry, position) for position, entry in enumerate(entries, start=1)]

        failure_rate = document.get("failure_rate")
        if failure_rate is not None:
            try:
                failure_rate = float(failure_rate)
            except (TypeError, ValueError):
                raise SequenceParseError(f"failure_rate must be a number, got {failure_rate!r}") from None
            if not 0.0 <= failure_rate <= 1.0:
                raise SequenceParseError(f"failure_rate must be between 0.0 and 1.0, got {failure_rate}")

        for warning in self.warnings:
            logger.warning(warning)

        return ParsedSequence(
            name=str(document.get("name") or default_name),
            requests=requests,
            failure_rate=failure_rate,
        )

    def get_warnings(self) -> List[str]:
        return list(self.warnings)

    def _normalize_fields(self, raw: Dict[str, Any]) -> Dict[str, Any]:
        """Map field variations onto their standard names."""
        normalized = {}
        known = set()
        for standard_field, variations in self.FIELD_MAPPINGS.items():
            known.update(variations)
            for variation in variations:
                if variation in raw:
                    normalized[standard_field] = raw[variation]
                    break

        for key in raw:
            if key not in known:
                self.warnings.append(f"Unknown field '{key}' ignored")

        return normalized

    def _to_request(self, entry: Any, position: int) -> RequestUnit:
        if entry is None:
            return RequestUnit.missing()
        if isinstance(entry, (dict, list)):
            raise SequenceParseError(f"Request {position} must be a scalar or null, got {type(entry).__name__}")
        if not isinstance(entry, str):
            self.warnings.append(f"Request {position} coerced to string: {entry!r}")
        return RequestUnit.present(str(entry))
