"""Read-only loader for the profile content shown on the page.

The person, experience, project and education records live in a JSON file
shipped with the package so the content can change without touching code.
"""
import json
import logging
from dataclasses import MISSING, dataclass, fields
from pathlib import Path
from typing import Any, Dict, List, Optional, Type, TypeVar

from portfolio.services.seo.constants import SEO_CONSTANTS
from portfolio.services.seo.models import (
    EducationData,
    ExperienceData,
    Location,
    PersonData,
    ProjectData,
    SocialProfiles,
)

logger = logging.getLogger(__name__)

DEFAULT_PROFILE_PATH = Path(__file__).resolve().parent.parent.parent / "data" / SEO_CONSTANTS.PROFILE_DATA_FILE_NAME

RecordT = TypeVar("RecordT")


@dataclass(frozen=True)
class ProfileContent:
    """Everything the page and its structured data describe."""
    person: PersonData
    experience: List[ExperienceData]
    projects: List[ProjectData]
    education: List[EducationData]


def _build_record(record_type: Type[RecordT], data: Dict[str, Any], section: str) -> RecordT:
    """Create a flat record from a dictionary.

    Raises:
        ValueError: If required fields are missing
    """
    if not isinstance(data, dict):
        raise ValueError(f"Invalid {section} record: expected an object")

    known = {f.name for f in fields(record_type)}
    required = {
        f.name for f in fields(record_type)
        if f.default is MISSING and f.default_factory is MISSING
    }
    missing_fields = required - set(data.keys())
    if missing_fields:
        raise ValueError(f"Missing required fields in {section}: {sorted(missing_fields)}")

    return record_type(**{key: value for key, value in data.items() if key in known})


def _build_person(data: Dict[str, Any]) -> PersonData:
    if not isinstance(data, dict):
        raise ValueError("Invalid person record: expected an object")
    try:
        location = _build_record(Location, data["location"], "person.location")
        social_profiles = _build_record(SocialProfiles, data["social_profiles"], "person.social_profiles")
    except KeyError as e:
        raise ValueError(f"Missing required fields in person: {str(e)}")

    flat = {key: value for key, value in data.items() if key not in ("location", "social_profiles")}
    flat["location"] = location
    flat["social_profiles"] = social_profiles
    return _build_record(PersonData, flat, "person")


class ProfileDataLoader:
    """Loads ProfileContent from a JSON file.

    The file holds a "person" object and "experience", "projects" and
    "education" arrays whose keys match the record field names.
    """

    def __init__(self, profile_file_path: Optional[str] = None):
        """Initialize the loader.

        Args:
            profile_file_path: Path to the profile JSON file. If None, uses the packaged file.
        """
        self.profile_file_path = Path(profile_file_path) if profile_file_path else DEFAULT_PROFILE_PATH

    def load(self) -> ProfileContent:
        """Load and validate the profile content.

        Returns:
            ProfileContent parsed from the file

        Raises:
            ValueError: If the JSON file is corrupted or a record is invalid
            IOError: If the file cannot be read
        """
        try:
            with open(self.profile_file_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Profile JSON file is corrupted: {str(e)}")
        except OSError as e:
            raise IOError(f"Cannot read profile file: {str(e)}")

        if not isinstance(data, dict) or "person" not in data:
            raise ValueError("Profile file must contain a 'person' object")

        content = ProfileContent(
            person=_build_person(data["person"]),
            experience=[_build_record(ExperienceData, item, "experience") for item in data.get("experience", [])],
            projects=[_build_record(ProjectData, item, "projects") for item in data.get("projects", [])],
            education=[_build_record(EducationData, item, "education") for item in data.get("education", [])],
        )

        logger.debug(
            f"Loaded profile from {self.profile_file_path}: "
            f"{len(content.experience)} experience, {len(content.projects)} projects, "
            f"{len(content.education)} education records"
        )
        return content
