"""
IdentifierFactory - record IDs, pseudo-regulatory IDs and contact strings.

SYNTHETIC IDENTIFIERS: pseudo_gstin, pseudo_pan, pseudo_cin and
pseudo_udyam produce strings with the *shape* of Indian GSTIN, PAN, CIN and
Udyam registration numbers (fixed length, fixed character classes). No
check digit or checksum algorithm is implemented and none of them will pass
real validation. They exist only to make demo profiles look plausible.

Record IDs are prefix + millisecond timestamp + 9 random base-36
characters. With 36**9 (~1e14) suffixes per millisecond the collision
probability for runs of 10,000 records is negligible, but uniqueness is
NOT guaranteed; nothing here checks for or retries on collisions.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from datetime import datetime

from .constants.reference import PHONE_PREFIXES
from .random_source import RandomSource

BASE36 = "0123456789abcdefghijklmnopqrstuvwxyz"

# Shapes of the synthetic identifiers, for tests and consumers
GSTIN_PATTERN = re.compile(r"^\d{2}[A-Z]{5}\d{6}[A-Z]1Z\d$")
PAN_PATTERN = re.compile(r"^[A-Z]{3}P[A-Z]\d{4}[A-Z]$")
CIN_PATTERN = re.compile(r"^U74999[A-Z]{2}\d{4}PTC\d{6}$")
UDYAM_PATTERN = re.compile(r"^UDYAM-[A-Z]{2}-\d{2}-\d{7}$")

CIN_STATE_CODES = ["MH", "DL", "KA", "TN", "GJ"]


def slugify_name(name: str) -> str:
    """'Rajesh Kumar' -> 'rajesh.kumar'."""
    return re.sub(r"\s+", ".", name.strip().lower())


def slugify_company(company: str) -> str:
    """'Bharat Pvt Ltd' -> 'bharatpvtltd'."""
    return re.sub(r"[^a-z]", "", company.lower())


class IdentifierFactory:
    """
    Synthesizes identifiers for one generation run.

    The supplier counter is per-factory state: share one factory across all
    generators of a run so company IDs stay sequential.

    Attributes:
        source: RandomSource used for every random character
        clock: Callable returning "now" (injectable for tests)
    """

    def __init__(
        self,
        source: RandomSource,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.source = source
        self.clock = clock
        self._supplier_counter = 0

    # ------------------------------------------------------------------
    # Record IDs
    # ------------------------------------------------------------------

    def new_record_id(self, prefix: str) -> str:
        """
        Low-collision record ID, e.g. 'rfq_1718000000000_k3j9x0a1b'.

        Not guaranteed unique, see module docstring.
        """
        timestamp_ms = int(self.clock().timestamp() * 1000)
        suffix = "".join(BASE36[self.source.randint(0, 35)] for _ in range(9))
        return f"{prefix}_{timestamp_ms}_{suffix}"

    def next_supplier_id(self) -> str:
        """Sequential company ID: SUPP000001, SUPP000002, ..."""
        self._supplier_counter += 1
        return f"SUPP{self._supplier_counter:06d}"

    @property
    def suppliers_issued(self) -> int:
        return self._supplier_counter

    # ------------------------------------------------------------------
    # Synthetic regulatory identifiers (shape only, never valid)
    # ------------------------------------------------------------------

    def pseudo_gstin(self, state_code: int | str) -> str:
        """
        GSTIN-shaped string: 2-digit state code, 'ABCDE', 6 digits, letter, '1Z', digit.

        SYNTHETIC: the trailing digit is random, not a checksum.
        """
        code = int(state_code)
        if not 1 <= code <= 99:
            raise ValueError(f"State code must be 1-99, got {state_code!r}")
        digits = self.source.randint(100000, 999999)
        letter = self.source.letters(1)
        check = self.source.randint(0, 9)
        return f"{code:02d}ABCDE{digits}{letter}1Z{check}"

    def pseudo_pan(self) -> str:
        """PAN-shaped string: 3 letters, 'P', letter, 4 digits, letter. SYNTHETIC."""
        first = self.source.letters(3)
        fifth = self.source.letters(1)
        digits = self.source.randint(1000, 9999)
        last = self.source.letters(1)
        return f"{first}P{fifth}{digits}{last}"

    def pseudo_cin(self) -> str:
        """CIN-shaped string for a private limited company. SYNTHETIC."""
        year = self.source.randint(1995, 2019)
        state = self.source.pick(CIN_STATE_CODES)
        serial = self.source.randint(100000, 999999)
        return f"U74999{state}{year}PTC{serial}"

    def pseudo_udyam(self, state_abbrev: str) -> str:
        """Udyam (MSME) registration-shaped string. SYNTHETIC."""
        district = self.source.randint(1, 99)
        serial = self.source.digits(7)
        return f"UDYAM-{state_abbrev.upper()[:2]}-{district:02d}-{serial}"

    # ------------------------------------------------------------------
    # Contact strings
    # ------------------------------------------------------------------

    def phone_number(self) -> str:
        """Indian mobile number, e.g. '+91 9812345678'."""
        prefix = self.source.pick(PHONE_PREFIXES)
        return f"{prefix}{self.source.digits(8)}"

    def landline_style_number(self) -> str:
        """Mobile number written as two 5-digit groups: '+91 98123 45678'."""
        first = self.source.randint(10000, 99999)
        second = self.source.randint(10000, 99999)
        return f"+91 {first} {second}"

    def whatsapp_number(self) -> str:
        return f"+91 {self.source.randint(100000000, 999999999)}"

    @staticmethod
    def email(name: str, company: str) -> str:
        """Derived, not random: 'Priya Sharma', 'Apex Group' -> 'priya.sharma@apexgroup.com'."""
        return f"{slugify_name(name)}@{slugify_company(company)}.com"

    @staticmethod
    def company_email(company: str) -> str:
        return f"info@{slugify_company(company)}.com"

    @staticmethod
    def linkedin_handle(first_name: str, last_name: str) -> str:
        first = slugify_company(first_name)
        last = slugify_company(last_name)
        return f"linkedin.com/in/{first}-{last}"
