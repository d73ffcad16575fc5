"""Administrative geography and constituency identifiers."""

import re

from app.models.reference import District, Division

# division -> (name, bengali name, [(district id, name, bengali name, seats)])
# Per-district counts sum to 298, two short of settings.TOTAL_SEATS. Ids beyond a
# district's count are not known constituencies even though the national total
# is 300.
_TABLE = {
    "dhaka": ("Dhaka", "ঢাকা", [
        ("dhaka", "Dhaka", "ঢাকা", 20),
        ("gazipur", "Gazipur", "গাজীপুর", 5),
        ("narayanganj", "Narayanganj", "নারায়ণগঞ্জ", 5),
        ("tangail", "Tangail", "টাঙ্গাইল", 8),
        ("kishoreganj", "Kishoreganj", "কিশোরগঞ্জ", 6),
        ("manikganj", "Manikganj", "মানিকগঞ্জ", 3),
        ("munshiganj", "Munshiganj", "মুন্সীগঞ্জ", 3),
        ("narsingdi", "Narsingdi", "নরসিংদী", 5),
        ("faridpur", "Faridpur", "ফরিদপুর", 4),
        ("gopalganj", "Gopalganj", "গোপালগঞ্জ", 3),
        ("madaripur", "Madaripur", "মাদারীপুর", 2),
        ("rajbari", "Rajbari", "রাজবাড়ী", 2),
        ("shariatpur", "Shariatpur", "শরীয়তপুর", 3),
    ]),
    "chattogram": ("Chattogram", "চট্টগ্রাম", [
        ("chattogram", "Chattogram", "চট্টগ্রাম", 16),
        ("coxs-bazar", "Cox's Bazar", "কক্সবাজার", 4),
        ("comilla", "Comilla", "কুমিল্লা", 11),
        ("feni", "Feni", "ফেনী", 3),
        ("brahmanbaria", "Brahmanbaria", "ব্রাহ্মণবাড়িয়া", 6),
        ("chandpur", "Chandpur", "চাঁদপুর", 5),
        ("lakshmipur", "Lakshmipur", "লক্ষ্মীপুর", 4),
        ("noakhali", "Noakhali", "নোয়াখালী", 6),
        ("rangamati", "Rangamati", "রাঙ্গামাটি", 1),
        ("bandarban", "Bandarban", "বান্দরবান", 1),
        ("khagrachhari", "Khagrachhari", "খাগড়াছড়ি", 1),
    ]),
    "rajshahi": ("Rajshahi", "রাজশাহী", [
        ("rajshahi", "Rajshahi", "রাজশাহী", 6),
        ("bogra", "Bogra", "বগুড়া", 7),
        ("pabna", "Pabna", "পাবনা", 5),
        ("natore", "Natore", "নাটোর", 3),
        ("naogaon", "Naogaon", "নওগাঁ", 6),
        ("nawabganj", "Nawabganj", "নবাবগঞ্জ", 3),
        ("sirajganj", "Sirajganj", "সিরাজগঞ্জ", 6),
        ("joypurhat", "Joypurhat", "জয়পুরহাট", 2),
    ]),
    "khulna": ("Khulna", "খুলনা", [
        ("khulna", "Khulna", "খুলনা", 6),
        ("jessore", "Jessore", "যশোর", 6),
        ("satkhira", "Satkhira", "সাতক্ষীরা", 4),
        ("bagerhat", "Bagerhat", "বাগেরহাট", 4),
        ("jhenaidah", "Jhenaidah", "ঝিনাইদহ", 4),
        ("magura", "Magura", "মাগুরা", 2),
        ("narail", "Narail", "নড়াইল", 2),
        ("kushtia", "Kushtia", "কুষ্টিয়া", 4),
        ("chuadanga", "Chuadanga", "চুয়াডাঙ্গা", 2),
        ("meherpur", "Meherpur", "মেহেরপুর", 2),
    ]),
    "barishal": ("Barishal", "বরিশাল", [
        ("barishal", "Barishal", "বরিশাল", 6),
        ("patuakhali", "Patuakhali", "পটুয়াখালী", 4),
        ("bhola", "Bhola", "ভোলা", 4),
        ("pirojpur", "Pirojpur", "পিরোজপুর", 3),
        ("jhalokathi", "Jhalokathi", "ঝালকাঠি", 2),
        ("barguna", "Barguna", "বরগুনা", 2),
    ]),
    "sylhet": ("Sylhet", "সিলেট", [
        ("sylhet", "Sylhet", "সিলেট", 6),
        ("moulvibazar", "Moulvibazar", "মৌলভীবাজার", 4),
        ("habiganj", "Habiganj", "হবিগঞ্জ", 4),
        ("sunamganj", "Sunamganj", "সুনামগঞ্জ", 5),
    ]),
    "rangpur": ("Rangpur", "রংপুর", [
        ("rangpur", "Rangpur", "রংপুর", 6),
        ("dinajpur", "Dinajpur", "দিনাজপুর", 6),
        ("kurigram", "Kurigram", "কুড়িগ্রাম", 4),
        ("gaibandha", "Gaibandha", "গাইবান্ধা", 5),
        ("nilphamari", "Nilphamari", "নীলফামারী", 4),
        ("lalmonirhat", "Lalmonirhat", "লালমনিরহাট", 3),
        ("thakurgaon", "Thakurgaon", "ঠাকুরগাঁও", 3),
        ("panchagarh", "Panchagarh", "পঞ্চগড়", 2),
    ]),
    "mymensingh": ("Mymensingh", "ময়মনসিংহ", [
        ("mymensingh", "Mymensingh", "ময়মনসিংহ", 11),
        ("jamalpur", "Jamalpur", "জামালপুর", 5),
        ("netrokona", "Netrokona", "নেত্রকোণা", 5),
        ("sherpur", "Sherpur", "শেরপুর", 3),
    ]),
}

DIVISIONS: tuple[Division, ...] = tuple(
    Division(
        id=div_id,
        name=name,
        bn_name=bn_name,
        districts=tuple(District(d_id, d_name, d_bn, div_id, seats) for d_id, d_name, d_bn, seats in districts),
    )
    for div_id, (name, bn_name, districts) in _TABLE.items()
)

DISTRICTS: dict[str, District] = {d.id: d for div in DIVISIONS for d in div.districts}


def normalize_constituency_id(raw: str) -> str:
    """URL-safe id: "Cox's Bazar-1" -> "coxs-bazar-1"."""
    cid = raw.strip().lower()
    cid = re.sub(r"['`’]", "", cid)
    cid = re.sub(r"\s+", "-", cid)
    return re.sub(r"-+", "-", cid)


def parse_constituency_id(cid: str) -> tuple[str, int]:
    """Split into (district_id, number). Number is 0 when missing."""
    cid = normalize_constituency_id(cid)
    district_id, sep, num = cid.rpartition("-")
    if not sep or not num.isdigit():
        return cid, 0
    return district_id, int(num)


def constituency_id(district_id: str, number: int) -> str:
    return f"{district_id}-{number}"


def get_district(district_id: str) -> District | None:
    return DISTRICTS.get(district_id)


def constituency_name(cid: str) -> str:
    """Display name, e.g. "Dhaka-1"."""
    district_id, number = parse_constituency_id(cid)
    district = get_district(district_id)
    if district is None:
        return f"Unknown-{number}"
    return f"{district.name}-{number}"


def is_known_constituency(cid: str) -> bool:
    district_id, number = parse_constituency_id(cid)
    district = get_district(district_id)
    return district is not None and 1 <= number <= district.seats


def all_constituency_ids() -> list[str]:
    """Every constituency id in division/district table order."""
    return [
        constituency_id(d.id, n)
        for div in DIVISIONS
        for d in div.districts
        for n in range(1, d.seats + 1)
    ]
