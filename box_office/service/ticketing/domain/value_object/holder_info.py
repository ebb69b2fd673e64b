from typing import Optional

import attrs


@attrs.frozen
class HolderInfo:
    name: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None

    def or_else(self, existing: 'HolderInfo') -> 'HolderInfo':
        """Field-wise fallback: blank values here keep the existing value."""
        return HolderInfo(
            name=self.name or existing.name,
            phone=self.phone or existing.phone,
            email=self.email or existing.email,
        )