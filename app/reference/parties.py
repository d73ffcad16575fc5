"""Static party and alliance tables."""

from app.models.reference import Alliance, Party

OTHER_PARTY_ID = "other"
INDEPENDENT_PARTY_ID = "independent"
OTHERS_ALLIANCE_ID = "others"

ALLIANCES: tuple[Alliance, ...] = (
    Alliance(id="bnp", name="BNP Alliance", short_name="BNP+", color="#E4002B"),
    Alliance(id="jamaat", name="Jamaat-NCP Alliance", short_name="JI+", color="#006400"),
    Alliance(id=OTHERS_ALLIANCE_ID, name="Others", short_name="OTH", color="#9CA3AF"),
)

PARTIES: tuple[Party, ...] = (
    Party(
        id="al",
        name="Bangladesh Awami League",
        short_name="AL",
        color="#00A651",
        symbol="⛵",
        order=1,
        aliases=("Awami League", "BAL"),
    ),
    Party(
        id="bnp",
        name="Bangladesh Nationalist Party",
        short_name="BNP",
        color="#E4002B",
        alliance_id="bnp",
        symbol="🌾",
        order=2,
    ),
    Party(
        id="jp-ershad",
        name="Jatiya Party (Ershad)",
        short_name="JP",
        color="#FFD700",
        symbol="🌻",
        order=3,
        aliases=("Jatiya Party",),
    ),
    Party(
        id="jamaat",
        name="Bangladesh Jamaat-e-Islami",
        short_name="JI",
        color="#006400",
        alliance_id="jamaat",
        symbol="⚖️",
        order=4,
        aliases=("Jamaat-e-Islami", "Jamaat"),
    ),
    Party(
        id="ncp",
        name="National Citizen Party",
        short_name="NCP",
        color="#F97316",
        alliance_id="jamaat",
        symbol="🌸",
        order=5,
    ),
    Party(
        id="jp-manju",
        name="Jatiya Party (Manju)",
        short_name="JP-M",
        color="#FFA500",
        symbol="🌻",
        order=6,
    ),
    Party(
        id="workers-party",
        name="Workers Party of Bangladesh",
        short_name="WP",
        color="#DC143C",
        symbol="⭐",
        order=7,
    ),
    Party(
        id="jasod",
        name="Jatiya Samajtantrik Dal",
        short_name="JSD",
        color="#8B0000",
        alliance_id="bnp",
        symbol="✊",
        order=8,
    ),
    Party(
        id="bikalpa-dhara",
        name="Bikalpa Dhara Bangladesh",
        short_name="BDB",
        color="#4169E1",
        symbol="🔷",
        order=9,
    ),
    Party(
        id="gono-forum",
        name="Gono Forum",
        short_name="GF",
        color="#9370DB",
        alliance_id="bnp",
        symbol="🏠",
        order=10,
    ),
    Party(
        id="ldf",
        name="Liberal Democratic Party",
        short_name="LDP",
        color="#20B2AA",
        alliance_id="bnp",
        symbol="📖",
        order=11,
    ),
    Party(
        id=INDEPENDENT_PARTY_ID,
        name="Independent",
        short_name="IND",
        color="#6B7280",
        is_independent=True,
        symbol="👤",
        order=99,
        aliases=("Independent Candidate",),
    ),
    Party(
        id=OTHER_PARTY_ID,
        name="Others",
        short_name="OTH",
        color="#9CA3AF",
        symbol="❓",
        order=100,
        aliases=("Other", "Unknown"),
    ),
)
