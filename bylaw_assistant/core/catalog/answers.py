"""Hand-verified answers for high-risk bylaw topics."""
from ..models.bylaw import AnswerTopic, BylawAnswer

ANSWERS: dict[AnswerTopic, BylawAnswer] = {
    AnswerTopic.CONSTRUCTION_NOISE: BylawAnswer(
        bylaw_number="3210",
        title="Anti-Noise Bylaw, 1977",
        citation="Section 5(7)(a) and 5(7)(b)",
        answer="""Construction hours in Oak Bay are regulated by Bylaw No. 3210 (Anti-Noise Bylaw):

1. Regular building permits:
   - Construction allowed 7:00 a.m. to 7:00 p.m. Monday through Saturday
   - No construction permitted on Sundays

2. Renewal permits:
   - Construction allowed 9:00 a.m. to 5:00 p.m. Monday through Saturday
   - No construction permitted on Sundays

These restrictions apply to any erection, demolition, construction, reconstruction, alteration or repair of buildings or structures.""",
        source="Anti-Noise Bylaw, 1977 (No. 3210), Section 5(7)(a) and 5(7)(b)",
        keywords=("construction", "build", "renovation"),
    ),
    AnswerTopic.LEAF_BLOWERS: BylawAnswer(
        bylaw_number="3210",
        title="Anti-Noise Bylaw, 1977",
        citation="Section 4(5)(a) and 4(5)(b)",
        answer="""Leaf blower operation in Oak Bay is regulated by Bylaw No. 3210 (Anti-Noise Bylaw):

1. Weekdays (Monday through Friday):
   - Permitted hours: 8:00 a.m. to 8:00 p.m.

2. Weekends and holidays:
   - Permitted hours: 9:00 a.m. to 5:00 p.m.

Operation outside these hours is prohibited.""",
        source="Anti-Noise Bylaw, 1977 (No. 3210), Section 4(5)(a) and 4(5)(b)",
        keywords=("leaf", "blower"),
    ),
    AnswerTopic.NOISE: BylawAnswer(
        bylaw_number="3210",
        title="Anti-Noise Bylaw, 1977",
        citation="Section 3(1) and 3(2)",
        answer="""Oak Bay's noise regulations (Bylaw No. 3210) prohibit:

1. Making any noise or sound that is liable to disturb the quiet, peace, rest, enjoyment, comfort or convenience of individuals or the public.

2. Property owners, tenants, or occupiers must not allow their property to be used in a way that creates disturbing noise.

Violations can result in fines up to $1,000.""",
        source="Anti-Noise Bylaw, 1977 (No. 3210), Section 3(1), 3(2) and 7",
        keywords=("noise", "loud", "sound"),
    ),
    AnswerTopic.TREE_REMOVAL: BylawAnswer(
        bylaw_number="4742",
        title="Tree Protection Bylaw, 2020",
        citation="Section 3.1",
        answer="""Tree removal in Oak Bay is regulated by the Tree Protection Bylaw (No. 4742):

1. A permit is required to cut, remove, or damage any protected tree.

2. Protected trees include:
   - Any tree with a diameter of 60 cm or greater at breast height
   - Arbutus, Dogwood, Garry Oak, or Western White Pine trees with a diameter of 10 cm or greater
   - Western Red Cedar or Big Leaf Maple trees with a diameter of 30 cm or greater

Violations can result in fines up to $10,000.""",
        source="Tree Protection Bylaw, 2020 (No. 4742), Sections 2.1, 3.1, and 10.1",
        keywords=("tree", "cutting", "arbutus"),
    ),
    AnswerTopic.DOG_CONTROL: BylawAnswer(
        bylaw_number="4013",
        title="Animal Control Bylaw, 1999",
        citation="Sections 4, 7, and 9",
        answer="""Dog regulations in Oak Bay (Animal Control Bylaw No. 4013):

1. Leash requirement: Dogs must be on a leash not exceeding 6 feet in length and under immediate control in all public places.

2. License fees:
   - $30 for neutered/spayed dogs
   - $45 for unneutered/unspayed dogs

3. Beach restrictions: Dogs are not permitted on public beaches between the westerly municipal boundary and the Oak Bay Marina from May 1 to September 30.""",
        source="Animal Control Bylaw, 1999 (No. 4013), Sections 4, 7, and 9",
        keywords=("dog", "pet", "leash", "beach"),
    ),
    AnswerTopic.ZONING: BylawAnswer(
        bylaw_number="3531",
        title="Zoning Bylaw",
        citation="Sections 5.1, 5.7, 6.5.1",
        answer="""Key Oak Bay zoning regulations (Bylaw No. 3531):

1. Minimum lot size for single-family residential: 695 square meters (7,481 square feet)

2. Building height: Maximum 7.32 meters (24 feet)

3. Secondary suites: Maximum of one secondary suite per single-family dwelling""",
        source="Zoning Bylaw (No. 3531), Sections 5.1, 5.7, and 6.5.1",
        keywords=("zoning", "lot", "height", "suite"),
    ),
}

# Classification priority. The first topic with a matching keyword wins.
TOPIC_PRIORITY: tuple[AnswerTopic, ...] = (
    AnswerTopic.CONSTRUCTION_NOISE,
    AnswerTopic.LEAF_BLOWERS,
    AnswerTopic.NOISE,
    AnswerTopic.TREE_REMOVAL,
    AnswerTopic.DOG_CONTROL,
    AnswerTopic.ZONING,
)

ANTI_NOISE_TRIGGERS: tuple[str, ...] = ("3210", "anti-noise", "anti noise")

ANTI_NOISE_OVERVIEW = BylawAnswer(
    bylaw_number="3210",
    title="Anti-Noise Bylaw, 1977",
    citation="Various sections",
    answer="""Oak Bay's Anti-Noise Bylaw (No. 3210) regulates noise in the municipality:

1. General prohibition (Section 3(1)): No person shall make any noise liable to disturb the quiet, peace, rest, enjoyment, comfort or convenience of individuals or the public.

2. Construction hours:
   - Regular permits: 7:00 a.m. to 7:00 p.m. Monday through Saturday (Section 5(7)(a))
   - Renewal permits: 9:00 a.m. to 5:00 p.m. Monday through Saturday (Section 5(7)(b))
   - No construction permitted on Sundays

3. Leaf blower restrictions:
   - Weekdays: 8:00 a.m. to 8:00 p.m. (Section 4(5)(b))
   - Weekends/holidays: 9:00 a.m. to 5:00 p.m. (Section 4(5)(a))

4. Penalties: Up to $1,000 fine for violations (Section 7)""",
    source="Anti-Noise Bylaw, 1977 (No. 3210), Consolidated to September 30, 2013",
)

NO_MATCH_TEMPLATE = (
    'I don\'t have specific information about "{topic}". Please try asking about '
    "common bylaw topics like construction noise, leaf blowers, tree removal, "
    "dog regulations, noise complaints, or zoning requirements."
)


def no_match_answer(topic: str) -> BylawAnswer:
    return BylawAnswer(
        bylaw_number="",
        title="",
        citation="",
        answer=NO_MATCH_TEMPLATE.format(topic=topic),
        source="",
    )
