"""Profile-based scheme recommendations.

A scheme is recommended when every criterion it declares is met by the
profile. Criteria the profile leaves blank do not exclude a scheme, so an
incomplete profile sees more schemes, never fewer.
"""

from datetime import date

from welfare.database.models import Profile, Scheme

_UNRESTRICTED = frozenset({"", "all", "any"})


def is_eligible(profile: Profile, scheme: Scheme, today: date | None = None) -> bool:
    today = today or date.today()
    return (
        not _expired(scheme, today)
        and _within_income(profile, scheme)
        and _within_age(profile, scheme)
        and _matches_gender(profile, scheme)
        and _matches_caste(profile, scheme)
        and _matches_region(profile, scheme)
    )


def recommend(
    profile: Profile,
    schemes: list[Scheme],
    today: date | None = None,
) -> list[Scheme]:
    """Return the schemes the profile qualifies for, in their original order."""
    return [scheme for scheme in schemes if is_eligible(profile, scheme, today)]


def _expired(scheme: Scheme, today: date) -> bool:
    return scheme.expiry_date is not None and scheme.expiry_date < today


def _within_income(profile: Profile, scheme: Scheme) -> bool:
    if scheme.income_limit is None or profile.annual_income is None:
        return True
    return profile.annual_income <= scheme.income_limit


def _within_age(profile: Profile, scheme: Scheme) -> bool:
    if profile.age is None:
        return True
    if scheme.age_min is not None and profile.age < scheme.age_min:
        return False
    return scheme.age_max is None or profile.age <= scheme.age_max


def _matches_gender(profile: Profile, scheme: Scheme) -> bool:
    required = (scheme.gender_specific or "").strip().lower()
    if required in _UNRESTRICTED or not profile.gender:
        return True
    return profile.gender.strip().lower() == required


def _matches_caste(profile: Profile, scheme: Scheme) -> bool:
    if not scheme.caste_categories or not profile.caste_category:
        return True
    allowed = {category.strip().lower() for category in scheme.caste_categories}
    return profile.caste_category.strip().lower() in allowed


def _matches_region(profile: Profile, scheme: Scheme) -> bool:
    if not scheme.region_specific or not scheme.regions or not profile.state:
        return True
    allowed = {region.strip().lower() for region in scheme.regions}
    return profile.state.strip().lower() in allowed
