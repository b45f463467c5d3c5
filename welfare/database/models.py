from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any

PENDING = "Pending"


def _optional_str(value: Any) -> str | None:
    return None if value is None else str(value)


@dataclass(frozen=True)
class Scheme:
    """Represents a row from the schemes table."""

    id: str
    title: str
    description: str
    eligibility_criteria: str
    benefits: str
    ministry: str
    category: str
    required_documents: list[str] = field(default_factory=list)
    region_specific: bool = False
    regions: list[str] | None = None
    income_limit: float | None = None
    age_min: int | None = None
    age_max: int | None = None
    gender_specific: str | None = None
    caste_categories: list[str] | None = None
    expiry_date: date | None = None
    application_link: str | None = None
    official_website: str | None = None
    created_at: datetime | None = None

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "Scheme":
        expiry = row.get("expiry_date")
        if isinstance(expiry, str):
            # Embedded rows arrive through row_to_json, so dates are ISO strings.
            expiry = date.fromisoformat(expiry[:10])
        income_limit = row.get("income_limit")
        return cls(
            id=str(row["id"]),
            title=row["title"],
            description=row["description"],
            eligibility_criteria=row["eligibility_criteria"],
            benefits=row["benefits"],
            ministry=row["ministry"],
            category=row["category"],
            required_documents=list(row.get("required_documents") or []),
            region_specific=bool(row.get("region_specific")),
            regions=row.get("regions"),
            income_limit=float(income_limit) if income_limit is not None else None,
            age_min=row.get("age_min"),
            age_max=row.get("age_max"),
            gender_specific=row.get("gender_specific"),
            caste_categories=row.get("caste_categories"),
            expiry_date=expiry,
            application_link=row.get("application_link"),
            official_website=row.get("official_website"),
            created_at=row.get("created_at"),
        )


@dataclass(frozen=True)
class Profile:
    """Represents a row from the profiles table. The id is the identity id."""

    id: str
    name: str = ""
    age: int | None = None
    gender: str | None = None
    caste_category: str | None = None
    religion: str | None = None
    annual_income: float | None = None
    state: str | None = None
    district: str | None = None
    city_village: str | None = None
    aadhaar_verified: bool = False
    avatar_url: str | None = None
    created_at: datetime | None = None

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "Profile":
        income = row.get("annual_income")
        return cls(
            id=str(row["id"]),
            name=row.get("name") or "",
            age=row.get("age"),
            gender=row.get("gender"),
            caste_category=row.get("caste_category"),
            religion=row.get("religion"),
            annual_income=float(income) if income is not None else None,
            state=row.get("state"),
            district=row.get("district"),
            city_village=row.get("city_village"),
            aadhaar_verified=bool(row.get("aadhaar_verified")),
            avatar_url=row.get("avatar_url"),
            created_at=row.get("created_at"),
        )


@dataclass(frozen=True)
class Application:
    """Represents a row from the applications table."""

    id: str
    user_id: str
    scheme_id: str
    status: str
    document_ids: list[str] = field(default_factory=list)
    submitted_data: dict[str, Any] = field(default_factory=dict)
    rejection_reason: str | None = None
    created_at: datetime | None = None
    scheme: Scheme | None = None

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "Application":
        scheme_row = row.get("scheme")
        return cls(
            id=str(row["id"]),
            user_id=str(row["user_id"]),
            scheme_id=str(row["scheme_id"]),
            status=row["status"],
            document_ids=list(row.get("document_ids") or []),
            submitted_data=dict(row.get("submitted_data") or {}),
            rejection_reason=row.get("rejection_reason"),
            created_at=row.get("created_at"),
            scheme=Scheme.from_row(scheme_row) if scheme_row else None,
        )


@dataclass(frozen=True)
class Grievance:
    """Represents a row from the grievances table."""

    id: str
    user_id: str
    issue_type: str
    description: str
    status: str
    document_ids: list[str] = field(default_factory=list)
    submitted_data: dict[str, Any] = field(default_factory=dict)
    scheme_id: str | None = None
    application_id: str | None = None
    response: str | None = None
    created_at: datetime | None = None
    scheme: Scheme | None = None

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "Grievance":
        scheme_row = row.get("scheme")
        return cls(
            id=str(row["id"]),
            user_id=str(row["user_id"]),
            issue_type=row["issue_type"],
            description=row["description"],
            status=row["status"],
            document_ids=list(row.get("document_ids") or []),
            submitted_data=dict(row.get("submitted_data") or {}),
            scheme_id=_optional_str(row.get("scheme_id")),
            application_id=_optional_str(row.get("application_id")),
            response=row.get("response"),
            created_at=row.get("created_at"),
            scheme=Scheme.from_row(scheme_row) if scheme_row else None,
        )


SubmissionRecord = Application | Grievance
