"""Turn user supplied component selections into component records"""

from pathlib import Path
from typing import Any, Iterable, List, Mapping, Optional, Tuple, Union

import yaml

from ..api.exceptions import SelectionError, ValidationError
from ..constants import SELECTION_SEPARATOR, SELECTION_WILDCARD
from ..models.component import ComponentRecord

SelectionPair = Tuple[str, str]


def parse_component_spec(spec: str) -> SelectionPair:
    """
    Split a ``Type:Name`` selection string

    Only the first separator splits, so names may contain ":".

    Raises:
        SelectionError: If either part is missing
    """
    comp_type, sep, name = spec.strip().partition(SELECTION_SEPARATOR)
    comp_type, name = comp_type.strip(), name.strip()

    if not sep or not comp_type or not name:
        raise SelectionError(
            f"Invalid component '{spec}'. Use 'Type:Name' (e.g. ApexClass:MyClass or ApexClass:*)"
        )
    return comp_type, name


def expand_selection(pairs: Iterable[SelectionPair],
                     metadata: Optional[Mapping[str, Iterable[str]]] = None) -> List[ComponentRecord]:
    """
    Convert (type, name) pairs to records

    A ``*`` name expands to every discovered component of that type. When
    no metadata is given the wildcard is kept as a literal member, which
    package.xml accepts for most types.

    Args:
        pairs: Selected (type, name) pairs
        metadata: Discovered metadata used for wildcard expansion

    Returns:
        Records in selection order, duplicates included
    """
    records: List[ComponentRecord] = []

    for comp_type, name in pairs:
        if name == SELECTION_WILDCARD and metadata is not None:
            records.extend(ComponentRecord(comp_type, n) for n in metadata.get(comp_type, ()))
            continue
        try:
            records.append(ComponentRecord(comp_type, name))
        except ValidationError as e:
            raise SelectionError(str(e))

    return records


def parse_selection(specs: Iterable[str],
                    metadata: Optional[Mapping[str, Iterable[str]]] = None) -> List[ComponentRecord]:
    """Parse ``Type:Name`` strings, expanding wildcards against ``metadata``"""
    return expand_selection((parse_component_spec(spec) for spec in specs), metadata)


def select_all(metadata: Mapping[str, Iterable[str]]) -> List[ComponentRecord]:
    """Select every discovered component"""
    return [
        ComponentRecord(comp_type, name)
        for comp_type, names in metadata.items()
        for name in names
    ]


def _pairs_from_document(data: Any) -> List[SelectionPair]:
    pairs: List[SelectionPair] = []

    if data is None:
        return pairs

    if isinstance(data, dict):
        # {ApexClass: [A, B], CustomLabels: CustomLabels}
        for comp_type, names in data.items():
            if isinstance(names, str):
                names = [names]
            if not isinstance(names, list):
                raise SelectionError(f"Members of '{comp_type}' must be a list of names")
            pairs.extend((str(comp_type), str(name)) for name in names)
        return pairs

    if isinstance(data, list):
        # [{type: ApexClass, name: A}, "ApexClass:B"]
        for entry in data:
            if isinstance(entry, str):
                pairs.append(parse_component_spec(entry))
            elif isinstance(entry, dict) and "type" in entry and "name" in entry:
                pairs.append((str(entry["type"]), str(entry["name"])))
            else:
                raise SelectionError(f"Invalid selection entry: {entry!r}")
        return pairs

    raise SelectionError("Selection file must contain a mapping or a list")


def load_selection_file(selection_path: Union[str, Path],
                        metadata: Optional[Mapping[str, Iterable[str]]] = None) -> List[ComponentRecord]:
    """
    Load a selection from a YAML (or JSON) file

    Args:
        selection_path: Selection file
        metadata: Discovered metadata used for wildcard expansion

    Returns:
        Selected records

    Raises:
        SelectionError: If the file cannot be read or has the wrong shape
    """
    selection_path = Path(selection_path)

    try:
        with open(selection_path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise SelectionError(f"Cannot read selection file {selection_path}: {e}")
    except yaml.YAMLError as e:
        raise SelectionError(f"Invalid selection file {selection_path}: {e}")

    return expand_selection(_pairs_from_document(data), metadata)
