"""Schema.org JSON-LD generation.

Each generator returns a JSON string to be embedded in a
<script type="application/ld+json"> block. Optional fields are emitted only
when present on the input record.
"""
import json
from typing import Any, Dict, List

from portfolio.services.seo.constants import SEO_CONSTANTS, SchemaType
from portfolio.services.seo.formatting import is_present, present_items
from portfolio.services.seo.models import (
    EducationData,
    ExperienceData,
    PersonData,
    ProjectData,
)


def _to_json(payload: Any) -> str:
    return json.dumps(payload, indent=2, ensure_ascii=False)


def _schema(schema_type: SchemaType) -> Dict[str, Any]:
    return {
        "@context": SEO_CONSTANTS.SCHEMA_CONTEXT,
        "@type": schema_type.value,
    }


def generate_person_schema(person: PersonData, site_url: str) -> str:
    """Generate a Person object for the profile subject.

    Args:
        person: Profile subject
        site_url: Absolute site URL used as the person's url

    Returns:
        JSON string holding a single object
    """
    schema = _schema(SchemaType.PERSON)
    schema.update({
        "name": person.name,
        "jobTitle": person.job_title,
        "url": site_url,
        "email": person.email,
        "telephone": person.phone,
        "address": {
            "@type": "PostalAddress",
            "addressLocality": person.location.city,
            "addressRegion": person.location.region,
            "addressCountry": person.location.country,
        },
        "sameAs": [
            person.social_profiles.github,
            person.social_profiles.linkedin,
        ],
    })

    if is_present(person.image):
        schema["image"] = person.image
    if is_present(person.bio):
        schema["description"] = person.bio

    return _to_json(schema)


def _work_experience(experience: ExperienceData) -> Dict[str, Any]:
    schema = _schema(SchemaType.WORK_EXPERIENCE)
    employer: Dict[str, Any] = {"@type": "Organization", "name": experience.company}
    schema.update({
        "name": experience.role,
        "description": experience.description,
        "startDate": experience.start_date,
        "employer": employer,
    })

    if is_present(experience.end_date):
        schema["endDate"] = experience.end_date
    if is_present(experience.company_url):
        employer["url"] = experience.company_url
    if is_present(experience.location):
        schema["location"] = experience.location
    skills = present_items(experience.skills)
    if skills:
        schema["skills"] = skills

    return schema


def generate_work_experience_schema(experiences: List[ExperienceData]) -> str:
    """Generate one WorkExperience object per employment period."""
    return _to_json([_work_experience(experience) for experience in experiences])


def _creative_work(project: ProjectData, author_name: str) -> Dict[str, Any]:
    schema = _schema(SchemaType.CREATIVE_WORK)
    schema.update({
        "name": project.name,
        "description": project.description,
        "author": {"@type": "Person", "name": author_name},
    })

    if is_present(project.url):
        schema["url"] = project.url
    if is_present(project.date_created):
        schema["dateCreated"] = project.date_created
    if is_present(project.date_published):
        schema["datePublished"] = project.date_published
    technologies = present_items(project.technologies)
    if technologies:
        schema["keywords"] = technologies

    return schema


def generate_creative_work_schema(projects: List[ProjectData], author_name: str) -> str:
    """Generate one CreativeWork object per project, all credited to author_name."""
    return _to_json([_creative_work(project, author_name) for project in projects])


def _education_credential(education: EducationData) -> Dict[str, Any]:
    schema = _schema(SchemaType.EDUCATIONAL_CREDENTIAL)
    schema.update({
        "name": f"{education.degree} in {education.field}",
        "recognizedBy": {"@type": "Organization", "name": education.institution},
    })

    if is_present(education.degree):
        schema["educationalLevel"] = education.degree
        schema["credentialCategory"] = education.field
    if is_present(education.start_date):
        schema["startDate"] = education.start_date
    if is_present(education.end_date):
        schema["endDate"] = education.end_date
    if is_present(education.gpa):
        schema["grade"] = education.gpa

    description_parts = []
    if is_present(education.degree) and is_present(education.field):
        description_parts.append(f"{education.degree} in {education.field}")
    if is_present(education.institution):
        description_parts.append(f"from {education.institution}")
    if is_present(education.location):
        description_parts.append(f"({education.location})")
    if description_parts:
        schema["description"] = " ".join(description_parts)

    return schema


def generate_education_schema(education: List[EducationData]) -> str:
    """Generate one EducationalOccupationalCredential object per credential."""
    return _to_json([_education_credential(item) for item in education])


def render_json_ld_script(payload: str) -> str:
    """Wrap a JSON-LD payload in its script tag.

    "</" is written as "<\\/" so a value can never close the script element;
    the payload stays valid JSON.
    """
    safe_payload = payload.replace("</", "<\\/")
    return f'<script type="application/ld+json">\n{safe_payload}\n</script>'
