import secrets

import attrs


@attrs.frozen
class BarcodeGenerator:
    """
    Prefix + upper-case hex from a CSPRNG, e.g. SB-3F9A0C11D2E4.

    Uniqueness is left to the storage constraint on ticket.barcode.
    """

    prefix: str = 'SB-'
    random_bytes: int = 6

    def __call__(self) -> str:
        return f'{self.prefix}{secrets.token_hex(self.random_bytes).upper()}'
