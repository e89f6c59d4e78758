"""Authoritative Oak Bay bylaw catalog.

Single table from which every lookup direction is derived: alias -> number
for resolving bylaws named by title, number -> title for citations, and the
verified set that gates which numbers may be cited.

Table order matters. Alias resolution is first-match-wins over the entries
in the order below, so the named bylaws come first, in the order their
aliases must be tried.
"""
import re
from typing import Iterable, Optional

from ..models.bylaw import BylawInfo

DOCUMENT_URL = "https://oakbay.civicweb.net/document/bylaw/{number}?section={section}"

SEPARATORS = re.compile(r"[-\s]+")


def normalize_name(name: str) -> str:
    """Lowercase, with hyphen and whitespace runs folded to one space."""
    return SEPARATORS.sub(" ", name.lower()).strip()


BYLAWS: tuple[BylawInfo, ...] = (
    # Bylaws that are named by topic in answers. Alias order is resolution order.
    BylawInfo(
        "4247",
        "Building and Plumbing Bylaw",
        ("building and plumbing",),
        "4247 Building and Plumbing Bylaw 2005 Consolidated to September 11 2023_0.pdf",
    ),
    BylawInfo(
        "4742",
        "Tree Protection Bylaw",
        ("tree protection",),
        "4742-Tree-Protection-Bylaw-2020-CONSOLIDATED.pdf",
    ),
    BylawInfo(
        "3210",
        "Anti-Noise Bylaw",
        ("anti-noise",),
        "3210 -  Anti-Noise Bylaw - Consolidated to 4594.pdf",
    ),
    BylawInfo(
        "4100",
        "Streets and Traffic Bylaw",
        ("streets and traffic", "streets traffic"),
        "4100-Streets-Traffic-Bylaw-2000.pdf",
    ),
    BylawInfo(
        "3531",
        "Zoning Bylaw",
        ("zoning",),
        "3531_ZoningBylawConsolidation_Aug302024.pdf",
    ),
    BylawInfo(
        "4672",
        "Parks and Beaches Bylaw",
        ("parks and beaches",),
        "4672-Parks-and-Beaches-Bylaw-2017-CONSOLIDATED.pdf",
    ),
    BylawInfo(
        "3578",
        "Subdivision and Development Bylaw",
        ("subdivision",),
        "3578_Subdivision-and-Development_CONSOLIDATED-to-September-2023.pdf",
    ),
    BylawInfo(
        "3545",
        "Uplands Bylaw",
        ("uplands",),
        "3545-Uplands-Bylaw-1987-(CONSOLIDATED-to-February-10-2020).pdf",
    ),
    BylawInfo(
        "4371",
        "Refuse Collection and Disposal Bylaw",
        ("refuse collection",),
        "4371-Refuse-Collection-and-Disposal-Bylaw-2007-(CONSOLIDATED).pdf",
    ),
    BylawInfo(
        "4183",
        "Board of Variance Bylaw",
        ("board of variance",),
        "4183_Board-of-Variance-Bylaw_CONSOLIDATED-to-Sept11-2023.pdf",
    ),
    BylawInfo(
        "4849",
        "Property Tax Exemption Bylaw",
        ("property tax exemption", "property tax"),
        "4849-Property-Tax-Exemption-Bylaw-No-4849-2023.pdf",
    ),
    BylawInfo(
        "4861",
        "Tax Rates Bylaw",
        ("tax rates",),
        "Tax Rates Bylaw 2024, No. 4861.pdf",
    ),
    BylawInfo(
        "4891",
        "Development Cost Charge Bylaw",
        ("development cost charge",),
        "Development Cost Charge Bylaw No. 4891, 2024.pdf",
    ),
    BylawInfo(
        "4892",
        "Amenity Cost Charge Bylaw",
        ("amenity cost charge",),
        "Amenity Cost Charge Bylaw No. 4892, 2024.pdf",
    ),
    BylawInfo(
        "3946",
        "Sign Bylaw",
        ("sign",),
        "3946 Sign Bylaw 1997 (CONSOLIDATED) to Sept 11 2023_0.pdf",
    ),
    BylawInfo(
        "4013",
        "Animal Control Bylaw",
        ("animal control",),
        "4013, Animal Control Bylaw, 1999 (CONSOLIDATED)_1.pdf",
    ),
    # Remaining bylaws in the PDF collection, cited by number only.
    BylawInfo("3152", "Bylaw No. 3152", pdf_filename="3152.pdf"),
    BylawInfo(
        "3370", "Water Rate Bylaw", pdf_filename="3370, Water Rate Bylaw, 1981 (CONSOLIDATED)_2.pdf"
    ),
    BylawInfo(
        "3416",
        "Boulevard Frontage Tax Bylaw",
        pdf_filename="3416-Boulevard-Frontage-Tax-BL-1982-CONSOLIDATED-to-May-8-2023.pdf",
    ),
    BylawInfo("3536", "Bylaw No. 3536", pdf_filename="3536.pdf"),
    BylawInfo(
        "3540",
        "Parking Facilities Bylaw",
        pdf_filename="3540, Parking Facilities BL 1986 (CONSOLIDATED)_1.pdf",
    ),
    BylawInfo(
        "3550", "Driveway Access Bylaw", pdf_filename="3550, Driveway Access BL (CONSOLIDATED).pdf"
    ),
    BylawInfo(
        "3603",
        "Business Licence Bylaw",
        pdf_filename="3603, Business Licence Bylaw 1988 - CONSOLIDATED FIN.pdf",
    ),
    BylawInfo("3805", "Bylaw No. 3805", pdf_filename="3805.pdf"),
    BylawInfo(
        "3827",
        "Records Administration Bylaw",
        pdf_filename="3827, Records Administration BL 94 (CONSOLIDATED 2).pdf",
    ),
    BylawInfo("3829", "Bylaw No. 3829", pdf_filename="3829.pdf"),
    BylawInfo("3832", "Bylaw No. 3832", pdf_filename="3832.pdf"),
    BylawInfo(
        "3891", "Public Sewer Bylaw", pdf_filename="3891-Public-Sewer-Bylaw,-1996-CONSOLIDATED.pdf"
    ),
    BylawInfo("3938", "Bylaw No. 3938", pdf_filename="3938.pdf"),
    BylawInfo(
        "3952",
        "Ticket Information Utilization Bylaw",
        pdf_filename="3952, Ticket Information Utilization BL 97 (CONSOLIDATED)_2.pdf",
    ),
    BylawInfo("4008", "Bylaw No. 4008", pdf_filename="4008.pdf"),
    BylawInfo(
        "4144",
        "Oil Burning Equipment and Fuel Tank Regulation Bylaw",
        pdf_filename="4144, Oil Burning Equipment and Fuel Tank Regulation Bylaw, 2002.pdf",
    ),
    BylawInfo("4222", "Bylaw No. 4222", pdf_filename="4222.pdf"),
    BylawInfo(
        "4239",
        "Administrative Procedures Bylaw",
        pdf_filename="4239, Administrative Procedures Bylaw, 2004, (CONSOLIDATED).pdf",
    ),
    BylawInfo(
        "4284", "Elections and Voting Bylaw", pdf_filename="4284, Elections and Voting (CONSOLIDATED).pdf"
    ),
    BylawInfo("4375", "Bylaw No. 4375", pdf_filename="4375.pdf"),
    BylawInfo(
        "4392",
        "Sewer User Charge Bylaw",
        pdf_filename="4392, Sewer User Charge Bylaw 2008 (CONSOLIDATED).pdf",
    ),
    BylawInfo("4421", "Bylaw No. 4421", pdf_filename="4421.pdf"),
    BylawInfo("4518", "Bylaw No. 4518", pdf_filename="4518.pdf"),
    BylawInfo(
        "4620",
        "Official Community Plan Bylaw",
        pdf_filename="4620, Oak Bay Official Community Plan Bylaw, 2014.pdf",
    ),
    BylawInfo(
        "4671",
        "Sign Bylaw Amendment Bylaw",
        pdf_filename="4671, Sign Bylaw Amendment Bylaw No. 4671, 2017.pdf",
    ),
    BylawInfo(
        "4719",
        "Fire Prevention and Life Safety Bylaw",
        pdf_filename="4719, Fire Prevention and Life Safety Bylaw, 2018.pdf",
    ),
    BylawInfo("4720", "Bylaw No. 4720", pdf_filename="4720.pdf"),
    BylawInfo(
        "4740",
        "Council Procedure Bylaw",
        pdf_filename="4740 Council Procedure Bylaw CONSOLIDATED 4740.003.pdf",
    ),
    BylawInfo(
        "4747", "Reserve Funds Bylaw", pdf_filename="4747, Reserve Funds Bylaw, 2020 CONSOLIDATED.pdf"
    ),
    BylawInfo(
        "4770",
        "Heritage Commission Bylaw",
        pdf_filename="4770 Heritage Commission Bylaw CONSOLIDATED 4770.001.pdf",
    ),
    BylawInfo(
        "4771",
        "Advisory Planning Commission Bylaw",
        pdf_filename="4771 Advisory Planning Commission Bylaw CONSOLIDATED 4771.001.pdf",
    ),
    BylawInfo(
        "4772",
        "Advisory Planning Commission Bylaw",
        pdf_filename="4772 Advisory Planning Commission Bylaw CONSOLIDATED 4772.001.pdf",
    ),
    BylawInfo(
        "4777",
        "PRC Fees and Charges Bylaw",
        pdf_filename="4777 PRC Fees and Charges Bylaw CONSOLIDATED.pdf",
    ),
    BylawInfo(
        "4822", "Council Remuneration Bylaw", pdf_filename="4822 Council Remuneration Bylaw - DRAFT.pdf"
    ),
    BylawInfo("4844", "Bylaw No. 4844", pdf_filename="4844-Consolidated-up to-4858.pdf"),
    BylawInfo(
        "4845",
        "Planning and Development Fees and Charges Bylaw",
        pdf_filename="4845-Planning-and-Development-Fees-and-Charges-CONSOLIDATED.pdf",
    ),
    BylawInfo(
        "4866",
        "Boulevard Frontage Tax Amendment Bylaw",
        pdf_filename="Boulevard Frontage Tax Amendment Bylaw No. 4866, 2024.pdf",
    ),
    BylawInfo(
        "4879",
        "Business Improvement Area Bylaw",
        pdf_filename="4879, Oak Bay Business Improvement Area Bylaw, 2024.pdf",
    ),
)


class BylawCatalog:
    """Read-only lookups over the bylaw table."""

    def __init__(
        self,
        bylaws: Iterable[BylawInfo] = BYLAWS,
        verified: Optional[Iterable[str]] = None,
    ):
        """Initialize catalog.

        Args:
            bylaws: Ordered bylaw entries.
            verified: Override for the set of citable numbers. Defaults to
                the entries flagged as verified.
        """
        self._bylaws = tuple(bylaws)
        self._by_number = {b.number: b for b in self._bylaws}
        if verified is None:
            verified = (b.number for b in self._bylaws if b.verified)
        self._verified = frozenset(verified)

    def __len__(self) -> int:
        return len(self._bylaws)

    @property
    def verified_numbers(self) -> frozenset[str]:
        return self._verified

    def get(self, number: str) -> Optional[BylawInfo]:
        return self._by_number.get(number)

    @property
    def aliases(self) -> tuple[str, ...]:
        """Every alias, in resolution order."""
        return tuple(alias for b in self._bylaws for alias in b.aliases)

    def is_verified(self, number: str) -> bool:
        return number in self._verified

    def resolve_name(self, name: str) -> Optional[str]:
        """Resolve a bylaw named by title to its number.

        Aliases are tried first, in table order, then full titles.
        Hyphens and spaces are interchangeable.
        """
        name_lower = normalize_name(name)

        for bylaw in self._bylaws:
            for alias in bylaw.aliases:
                if normalize_name(alias) in name_lower:
                    return bylaw.number

        for bylaw in self._bylaws:
            if normalize_name(bylaw.title) in name_lower:
                return bylaw.number

        return None

    def title_for(self, number: str) -> str:
        bylaw = self._by_number.get(number)
        return bylaw.title if bylaw else f"Bylaw No. {number}"

    def pdf_filename(self, number: str) -> str:
        bylaw = self._by_number.get(number)
        if bylaw and bylaw.pdf_filename:
            return bylaw.pdf_filename
        return f"{number}.pdf"

    def document_url(self, number: str, section: str = "1") -> str:
        return DOCUMENT_URL.format(number=number, section=section)
