"""
Decoding of the add endpoint's newline-delimited JSON response.

The service emits one JSON object per line. Records without a ``Hash``
(progress reports) are dropped; the rest become AddedFile entries in the
order they were emitted. Any malformed line fails the whole batch.
"""
import json
import re
from typing import Any, Callable, Dict, List, Optional

from multiformats import CID

from ..exceptions import MalformedResponse, InvalidSize, InvalidIdentifier
from .models import AddedFile

_DECIMAL = re.compile(r"[0-9]+")


def parse_cid(value: Any) -> CID:
    """
    Parse a content identifier string.
    
    Raises:
        InvalidIdentifier: If ``value`` is not a valid CID
    """
    if not isinstance(value, str):
        raise InvalidIdentifier(value, "expected a string")
    try:
        return CID.decode(value)
    except Exception as e:
        raise InvalidIdentifier(value, str(e)) from e


def parse_size(value: Any, name: Optional[str] = None) -> int:
    """
    Parse a record's Size field as a non-negative base-10 integer.
    
    Raises:
        InvalidSize: If the value is missing, non-numeric or negative
    """
    if isinstance(value, bool):
        raise InvalidSize(value, name)
    if isinstance(value, int):
        size = value
    elif isinstance(value, str):
        digits = value.strip()
        if not _DECIMAL.fullmatch(digits):
            raise InvalidSize(value, name)
        size = int(digits, 10)
    else:
        raise InvalidSize(value, name)
    
    if size < 0:
        raise InvalidSize(value, name)
    return size


def split_records(text: str) -> List[Dict[str, Any]]:
    """
    Parse every non-blank line of ``text`` as a JSON object.
    
    Raises:
        MalformedResponse: On the first line that is not a JSON object
    """
    records = []
    for number, line in enumerate(text.strip().split('\n'), start=1):
        line = line.strip()
        if not line:
            continue
        try:
            record = json.loads(line)
        except ValueError as e:
            raise MalformedResponse(
                f"Line {number} is not valid JSON: {e}", line=line, line_number=number
            ) from e
        if not isinstance(record, dict):
            raise MalformedResponse(
                f"Line {number} is not a JSON object", line=line, line_number=number
            )
        records.append(record)
    return records


def decode_add_entry(
    record: Dict[str, Any],
    cid_parser: Callable[[Any], CID] = parse_cid
) -> AddedFile:
    """Map one service record (Hash/Name/Size) to an AddedFile."""
    name = record.get('Name')
    if name is None:
        name = ''
    elif not isinstance(name, str):
        raise MalformedResponse(f"Name must be a string, got {name!r}", line=json.dumps(record))
    return AddedFile(
        cid=cid_parser(record['Hash']),
        path=name,
        size=parse_size(record.get('Size'), name),
    )


def decode_add_response(
    text: str,
    cid_parser: Callable[[Any], CID] = parse_cid
) -> List[AddedFile]:
    """
    Decode a complete add response body.
    
    Args:
        text: Response body
        cid_parser: Content identifier parser
        
    Returns:
        AddedFile entries in emission order
        
    Raises:
        MalformedResponse: If any line is not a JSON object
        InvalidSize: If a kept record has a bad Size
        InvalidIdentifier: If a kept record has a bad Hash
    """
    return [
        decode_add_entry(record, cid_parser)
        for record in split_records(text)
        if record.get('Hash') is not None
    ]
