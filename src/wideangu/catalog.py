"""Static marketplace catalog — professional types, categories, demo listings.

Learn: The catalog is process-wide configuration data. It is built once at
import time and shared by reference across every request handler. The
collections are tuples / read-only mappings and the records are frozen
pydantic models, so there is no mutation path and no locking is needed.
"""

from enum import Enum
from types import MappingProxyType

from wideangu.schemas.catalog import ProfessionalListing, ServiceCategory


class ProfessionalType(str, Enum):
    """The fifteen kinds of media professional the marketplace supports."""

    PHOTOGRAPHER = "photographer"
    VIDEOGRAPHER = "videographer"
    VIDEO_EDITOR = "video_editor"
    PHOTO_EDITOR = "photo_editor"
    LIGHTING_PRO = "lighting_professional"
    SOUND_ENGINEER = "sound_engineer"
    EVENT_SPECIALIST = "event_specialist"
    DRONE_OPERATOR = "drone_operator"
    CONTENT_CREATOR = "content_creator"
    STUDIO_MANAGER = "studio_manager"
    MAKEUP_ARTIST = "makeup_artist"
    STYLIST = "stylist"
    SET_DESIGNER = "set_designer"
    PRODUCER = "producer"
    DIRECTOR = "director"


# KEY → label, in declaration order (this is the wire shape of /professionals/types)
PROFESSIONAL_TYPES = MappingProxyType(
    {member.name: member.value for member in ProfessionalType}
)


# ─── Service categories ─────────────────────────────────

SERVICE_CATEGORIES: tuple[ServiceCategory, ...] = (
    ServiceCategory(id="photography", name="Photography Services", icon="📸"),
    ServiceCategory(id="videography", name="Videography Services", icon="🎥"),
    ServiceCategory(id="editing", name="Editing & Post-Production", icon="✂️"),
    ServiceCategory(id="lighting", name="Lighting Services", icon="💡"),
    ServiceCategory(id="audio", name="Audio & Sound", icon="🎙️"),
    ServiceCategory(id="events", name="Event Services", icon="🎪"),
    ServiceCategory(id="aerial", name="Aerial & Drone", icon="🚁"),
    ServiceCategory(id="studio", name="Studio Services", icon="🏢"),
    ServiceCategory(id="creative", name="Creative Services", icon="🎨"),
)


# ─── Demo professionals ─────────────────────────────────

DEMO_PROFESSIONALS: tuple[ProfessionalListing, ...] = (
    ProfessionalListing(
        id=1,
        name="Creative Lens Studios",
        type=ProfessionalType.PHOTOGRAPHER.value,
        rating=4.8,
        location="Lagos",
        specializations=("Wedding", "Corporate", "Portrait"),
    ),
    ProfessionalListing(
        id=2,
        name="ProVideo Solutions",
        type=ProfessionalType.VIDEOGRAPHER.value,
        rating=4.9,
        location="Lagos",
        specializations=("Documentary", "Commercial", "Event"),
    ),
    ProfessionalListing(
        id=3,
        name="EditMaster Pro",
        type=ProfessionalType.VIDEO_EDITOR.value,
        rating=4.7,
        location="Lagos",
        specializations=("Color Grading", "Motion Graphics", "VFX"),
    ),
    ProfessionalListing(
        id=4,
        name="LightWorks Professional",
        type=ProfessionalType.LIGHTING_PRO.value,
        rating=4.9,
        location="Lagos",
        specializations=("Stage Lighting", "Film Lighting", "Event"),
    ),
    ProfessionalListing(
        id=5,
        name="SoundCraft Audio",
        type=ProfessionalType.SOUND_ENGINEER.value,
        rating=4.6,
        location="Lagos",
        specializations=("Live Sound", "Studio Recording", "Mixing"),
    ),
    ProfessionalListing(
        id=6,
        name="EventPro Masters",
        type=ProfessionalType.EVENT_SPECIALIST.value,
        rating=4.8,
        location="Lagos",
        specializations=("Corporate Events", "Weddings", "Conferences"),
    ),
    ProfessionalListing(
        id=7,
        name="SkyView Aerials",
        type=ProfessionalType.DRONE_OPERATOR.value,
        rating=4.7,
        location="Lagos",
        specializations=("Aerial Photography", "Mapping", "Inspection"),
    ),
)

# The listing endpoint reports these as constants, not derived from the list
LISTING_TOTAL = 7
LISTING_PAGE = 1
