from typing import Any, Dict, Optional

import attrs

from src.platform.exception.exceptions import ValidationFailureError


def _validate_required(instance: object, attribute: attrs.Attribute, value: str) -> None:
    if not isinstance(value, str) or not value.strip():
        raise ValidationFailureError(f'Location {attribute.name} is required')


@attrs.frozen
class Location:
    house_number: str = attrs.field(validator=_validate_required)
    ward: str = attrs.field(validator=_validate_required)
    district: str = attrs.field(validator=_validate_required)
    province: str = attrs.field(validator=_validate_required)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> 'Location':
        data = data or {}
        return cls(
            house_number=data.get('house_number', ''),
            ward=data.get('ward', ''),
            district=data.get('district', ''),
            province=data.get('province', ''),
        )

    def to_dict(self) -> Dict[str, str]:
        return attrs.asdict(self)
