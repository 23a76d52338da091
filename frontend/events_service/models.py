"""
Event and registration form models.

The registration form is one immutable value object. Every edit goes through
with_field(), so the snapshot handed to submit is always consistent.
"""

from dataclasses import dataclass, fields, replace
from datetime import date
from typing import Any, Dict, List, Mapping, Optional

# --- CONSTANTS FOR VALIDATION ---
TSHIRT_SIZES = ["XS", "S", "M", "L", "XL", "XXL"]
DIVISIONS = ["A", "B"]
GRADUATION_WINDOW_YEARS = 10

MISSING_FIELDS_ERROR = "Please fill in all required fields"
INVALID_TSHIRT_ERROR = "Please select a valid t-shirt size"
INVALID_DIVISION_ERROR = "Please select a valid division"
INVALID_YEAR_ERROR = "Please select a valid graduation year"
ACKNOWLEDGEMENTS_ERROR = "Please accept all required acknowledgements"


def graduation_years(today: Optional[date] = None) -> List[int]:
    """
    Ten consecutive graduation years starting with the current year.

    Args:
        today (date, optional): Reference date. Defaults to date.today().
    """
    start = (today or date.today()).year
    return [start + i for i in range(GRADUATION_WINDOW_YEARS)]


CHECKED_VALUES = ("on", "true", "1", "yes")
UNCHECKED_VALUES = ("", "off", "false", "0", "no")


def parse_checkbox(value: Any) -> bool:
    """
    Read a checkbox value. Accepts booleans, None and the usual form strings.

    Raises:
        ValueError: For any other value.
    """
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in CHECKED_VALUES:
            return True
        if lowered in UNCHECKED_VALUES:
            return False
    raise ValueError(f"Not a checkbox value: {value!r}")


@dataclass(frozen=True)
class Event:
    id: str
    name: str
    description: Optional[str] = None
    location: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    registration_open: bool = False

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Event":
        """
        Build an Event from the API's camelCase JSON.

        Raises:
            KeyError: If id or name is missing.
        """
        return cls(
            id=str(data["id"]),
            name=data["name"],
            description=data.get("description"),
            location=data.get("location"),
            start_date=data.get("startDate"),
            end_date=data.get("endDate"),
            registration_open=bool(data.get("registrationOpen", False)),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Inverse of from_dict, in the API's camelCase shape."""
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "location": self.location,
            "startDate": self.start_date,
            "endDate": self.end_date,
            "registrationOpen": self.registration_open,
        }

    @property
    def label(self) -> str:
        # Shown in the event <select>
        if self.location:
            return f"{self.name} - {self.location}"
        return self.name


@dataclass(frozen=True)
class RegistrationForm:
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    tshirt_size: str = ""
    division: str = ""
    expected_graduation_year: str = ""
    university: str = ""
    resume_url: str = ""
    acknowledged_id_requirement: bool = False
    acknowledged_filming: bool = False
    acknowledged_team_merge: bool = False
    interested_in_financial_aid: bool = False

    TEXT_FIELDS = (
        "first_name",
        "last_name",
        "email",
        "tshirt_size",
        "division",
        "expected_graduation_year",
        "university",
        "resume_url",
    )
    CHECKBOX_FIELDS = (
        "acknowledged_id_requirement",
        "acknowledged_filming",
        "acknowledged_team_merge",
        "interested_in_financial_aid",
    )
    REQUIRED_FIELDS = (
        "first_name",
        "last_name",
        "email",
        "tshirt_size",
        "division",
        "expected_graduation_year",
        "university",
    )
    REQUIRED_ACKNOWLEDGEMENTS = (
        "acknowledged_id_requirement",
        "acknowledged_filming",
        "acknowledged_team_merge",
    )

    @classmethod
    def field_names(cls) -> List[str]:
        return [f.name for f in fields(cls)]

    @classmethod
    def from_form(cls, form: Mapping[str, Any]) -> "RegistrationForm":
        """
        Build a form snapshot from validated form data, e.g. a WTForm's `data`.

        Text inputs are stripped. Checkbox values go through parse_checkbox().
        """
        values: Dict[str, Any] = {}
        for name in cls.TEXT_FIELDS:
            values[name] = (form.get(name) or "").strip()
        for name in cls.CHECKBOX_FIELDS:
            values[name] = parse_checkbox(form.get(name))
        return cls(**values)

    def with_field(self, name: str, value: Any) -> "RegistrationForm":
        """
        Return a copy with one field changed.

        Raises:
            ValueError: If `name` is not a form field, or a checkbox value
                is not recognised.
        """
        if name not in self.field_names():
            raise ValueError(f"Unknown registration field: {name}")
        if name in self.CHECKBOX_FIELDS:
            value = parse_checkbox(value)
        else:
            value = "" if value is None else str(value)
        return replace(self, **{name: value})

    def missing_fields(self) -> List[str]:
        return [name for name in self.REQUIRED_FIELDS if not getattr(self, name).strip()]

    def validation_error(self, years: List[int]) -> Optional[str]:
        """
        First local validation problem, or None.

        Only a convenience for the user; the API validates again and is the
        authority on what is accepted.

        Args:
            years (list): Graduation years offered by the form.
        """
        if self.missing_fields():
            return MISSING_FIELDS_ERROR
        if self.tshirt_size not in TSHIRT_SIZES:
            return INVALID_TSHIRT_ERROR
        if self.division not in DIVISIONS:
            return INVALID_DIVISION_ERROR
        try:
            year = int(self.expected_graduation_year)
        except ValueError:
            return INVALID_YEAR_ERROR
        if year not in years:
            return INVALID_YEAR_ERROR
        if not all(getattr(self, name) for name in self.REQUIRED_ACKNOWLEDGEMENTS):
            return ACKNOWLEDGEMENTS_ERROR
        return None

    def to_payload(self) -> Dict[str, Any]:
        """
        JSON body for POST /api/events/{id}/register.

        Raises:
            ValueError: If the graduation year is not an integer.
        """
        return {
            "firstName": self.first_name,
            "lastName": self.last_name,
            "email": self.email,
            "tshirtSize": self.tshirt_size,
            "division": self.division,
            "expectedGraduationYear": int(self.expected_graduation_year),
            "university": self.university,
            "resumeUrl": self.resume_url or None,
            "acknowledgedIdRequirement": self.acknowledged_id_requirement,
            "acknowledgedFilming": self.acknowledged_filming,
            "acknowledgedTeamMerge": self.acknowledged_team_merge,
            "interestedInFinancialAid": self.interested_in_financial_aid,
        }
