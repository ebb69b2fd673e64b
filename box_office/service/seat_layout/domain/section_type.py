from enum import StrEnum


class SectionType(StrEnum):
    ORCHESTRA = 'orchestra'
    BALCONY = 'balcony'
    BOX = 'box'
    LEFT_WING = 'left_wing'
    CENTER = 'center'
    RIGHT_WING = 'right_wing'


THEATER_ROLES: tuple[str, ...] = (
    SectionType.LEFT_WING,
    SectionType.CENTER,
    SectionType.RIGHT_WING,
)

SECTION_TYPE_LABELS: dict[str, str] = {
    SectionType.ORCHESTRA: 'Orchestra',
    SectionType.BALCONY: 'Balcony',
    SectionType.BOX: 'Box',
    SectionType.LEFT_WING: 'Left Wing',
    SectionType.CENTER: 'Center',
    SectionType.RIGHT_WING: 'Right Wing',
}


def section_type_label(section_type: str) -> str:
    # Unknown types are shown as-is
    return SECTION_TYPE_LABELS.get(section_type, section_type)
