"""
SQL helpers
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping

from insect_shop.exceptions import InvalidArgument


@dataclass
class PartialUpdate:
    """Ordered SET assignments and the values bound to their placeholders"""
    
    assignments: List[str] = field(default_factory=list)
    values: List[Any] = field(default_factory=list)
    
    @property
    def set_clause(self) -> str:
        return ", ".join(self.assignments)
    
    @property
    def next_placeholder(self) -> str:
        """Placeholder for the first value appended after the SET values"""
        return placeholder(len(self.values) + 1)
    
    def params(self, *extra: Any) -> Dict[str, Any]:
        """
        Bind parameters for the statement
        
        Extra values continue the numbering, e.g. the key used in WHERE.
        """
        all_values = list(self.values) + list(extra)
        return {f"p{idx}": value for idx, value in enumerate(all_values, start=1)}


def placeholder(index: int) -> str:
    return f":p{index}"


def sql_for_partial_update(data: Mapping[str, Any], column_names: Mapping[str, str]) -> PartialUpdate:
    """
    Build the SET part of an UPDATE from a sparse payload
    
    Args:
        data: Field -> new value, e.g. {"price": 9.99, "image_url": "..."}
        column_names: Allowed field -> column, e.g. {"image_url": "image_url"}
    
    Returns:
        PartialUpdate, e.g. assignments ["price = :p1", "image_url = :p2"]
        with values [9.99, "..."]
    
    Raises:
        InvalidArgument: If data is empty or no field is updatable
    """
    if not data:
        raise InvalidArgument("No data")
    
    update = PartialUpdate()
    for field_name, value in data.items():
        column = column_names.get(field_name)
        if column is None:
            continue
        update.values.append(value)
        update.assignments.append(f"{column} = {placeholder(len(update.values))}")
    
    if not update.assignments:
        raise InvalidArgument("No updatable fields in data")
    
    return update


def escape_like(term: str) -> str:
    """Escape LIKE wildcards so the term matches literally (escape char is a backslash)"""
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
