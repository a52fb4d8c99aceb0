from typing import List, Optional, Tuple

from pydantic import BaseModel

StringPairs = List[Tuple[str, str]]


class ProofKeyAttributes(BaseModel):
    value: str
    modulus: str
    exponent: str

    def as_pairs(self) -> Tuple[Tuple[str, str], ...]:
        return (("value", self.value), ("modulus", self.modulus), ("exponent", self.exponent))


class ProofStatus(BaseModel):
    enabled: bool
    key_path: str
    key_size: Optional[int] = None
    reason: Optional[str] = None
