"""
Option list helpers for selects, checkbox sets and radio sets.

All helpers return plain dicts (value -> display) or lists so they can be
passed straight to FormBuilder.select()/radio_set()/checkbox_set().
"""
from __future__ import annotations

import math
from typing import Any, Dict, Iterable, List, Sequence, Union

from .state import as_mapping


def prep_options(rows: Iterable[Any], fields: Union[str, Sequence[str]]) -> Dict[Any, Any]:
    """Build options from records.

    Args:
        rows: Mappings, pydantic models, dataclasses or plain objects.
        fields: One field name (used for both value and display) or a
            (value_field, display_field) pair.

    Rows missing a requested field are skipped.
    """
    if isinstance(fields, str):
        value_key, display_key = fields, fields
    elif len(fields) == 1:
        value_key = display_key = fields[0]
    elif len(fields) >= 2:
        value_key, display_key = fields[0], fields[1]
    else:
        return {}

    options: Dict[Any, Any] = {}
    for row in rows:
        record = as_mapping(row)
        if value_key in record and display_key in record:
            options[record[value_key]] = record[display_key]
    return options


def simple_options(values: Iterable[Any]) -> Dict[Any, Any]:
    """Use each value as its own display text."""
    return {value: value for value in values}


def offset_options(values: Sequence[Any]) -> Dict[int, Any]:
    """Key a list from 1 so no option ends up with value 0."""
    return {index + 1: value for index, value in enumerate(values)}


def number_options(start: float = 1, end: float = 10, increment: float = 1, decimals: int = 0) -> Dict[Any, Any]:
    """Numbers from start to end inclusive; counts down when start > end."""
    if increment <= 0:
        raise ValueError("increment must be positive")
    step = increment if start <= end else -increment
    count = int(math.floor(abs(end - start) / increment + 1e-9)) + 1
    options: Dict[Any, Any] = {}
    for index in range(count):
        number = start + index * step
        value: Any = f"{number:.{decimals}f}" if decimals else number
        options[value] = value
    return options


STATES = {
    "AL": "Alabama", "AK": "Alaska", "AZ": "Arizona", "AR": "Arkansas", "CA": "California",
    "CO": "Colorado", "CT": "Connecticut", "DE": "Delaware", "DC": "District of Columbia",
    "FL": "Florida", "GA": "Georgia", "HI": "Hawaii", "ID": "Idaho", "IL": "Illinois",
    "IN": "Indiana", "IA": "Iowa", "KS": "Kansas", "KY": "Kentucky", "LA": "Louisiana",
    "ME": "Maine", "MD": "Maryland", "MA": "Massachusetts", "MI": "Michigan", "MN": "Minnesota",
    "MS": "Mississippi", "MO": "Missouri", "MT": "Montana", "NE": "Nebraska", "NV": "Nevada",
    "NH": "New Hampshire", "NJ": "New Jersey", "NM": "New Mexico", "NY": "New York",
    "NC": "North Carolina", "ND": "North Dakota", "OH": "Ohio", "OK": "Oklahoma", "OR": "Oregon",
    "PA": "Pennsylvania", "PR": "Puerto Rico", "RI": "Rhode Island", "SC": "South Carolina",
    "SD": "South Dakota", "TN": "Tennessee", "TX": "Texas", "UT": "Utah", "VT": "Vermont",
    "VA": "Virginia", "VI": "Virgin Islands", "WA": "Washington", "WV": "West Virginia",
    "WI": "Wisconsin", "WY": "Wyoming",
}

PROVINCES = {
    "AB": "Alberta", "BC": "British Columbia", "MB": "Manitoba", "NB": "New Brunswick",
    "NL": "Newfoundland", "NT": "Northwest Territories", "NS": "Nova Scotia", "NU": "Nunavut",
    "ON": "Ontario", "PE": "Prince Edward Island", "QC": "Quebec", "SK": "Saskatchewan",
    "YT": "Yukon Territory",
}

COUNTRIES = (
    "Canada", "United States", "Afghanistan", "Albania", "Algeria", "American Samoa", "Andorra",
    "Angola", "Anguilla", "Antarctica", "Antigua And Barbuda", "Argentina", "Armenia", "Aruba",
    "Australia", "Austria", "Azerbaijan", "Bahamas", "Bahrain", "Bangladesh", "Barbados",
    "Belarus", "Belgium", "Belize", "Benin", "Bermuda", "Bhutan", "Bolivia",
    "Bosnia And Herzegowina", "Botswana", "Bouvet Island", "Brazil",
    "British Indian Ocean Territory", "Brunei Darussalam", "Bulgaria", "Burkina Faso", "Burundi",
    "Cambodia", "Cameroon", "Cape Verde", "Cayman Islands", "Central African Republic", "Chad",
    "Chile", "China", "Christmas Island", "Cocos (Keeling) Islands", "Colombia", "Comoros",
    "Congo", "Congo, The Democratic Republic Of The", "Cook Islands", "Costa Rica",
    "Cote D'Ivoire", "Croatia (Local Name: Hrvatska)", "Cuba", "Cyprus", "Czech Republic",
    "Denmark", "Djibouti", "Dominica", "Dominican Republic", "East Timor", "Ecuador", "Egypt",
    "El Salvador", "Equatorial Guinea", "Eritrea", "Estonia", "Ethiopia",
    "Falkland Islands (Malvinas)", "Faroe Islands", "Fiji", "Finland", "France",
    "France, Metropolitan", "French Guiana", "French Polynesia", "French Southern Territories",
    "Gabon", "Gambia", "Georgia", "Germany", "Ghana", "Gibraltar", "Greece", "Greenland",
    "Grenada", "Guadeloupe", "Guam", "Guatemala", "Guinea", "Guinea-Bissau", "Guyana", "Haiti",
    "Heard And Mc Donald Islands", "Holy See (Vatican City State)", "Honduras", "Hong Kong",
    "Hungary", "Iceland", "India", "Indonesia", "Iran", "Iraq", "Ireland", "Israel", "Italy",
    "Jamaica", "Japan", "Jordan", "Kazakhstan", "Kenya", "Kiribati",
    "Korea, Democratic People'S Republic Of", "Korea, Republic Of", "Kuwait", "Kyrgyzstan",
    "Lao People'S Democratic Republic", "Latvia", "Lebanon", "Lesotho", "Liberia",
    "Libyan Arab Jamahiriya", "Liechtenstein", "Lithuania", "Luxembourg", "Macau",
    "Macedonia, Former Yugoslav Republic Of", "Madagascar", "Malawi", "Malaysia", "Maldives",
    "Mali", "Malta", "Marshall Islands", "Martinique", "Mauritania", "Mauritius", "Mayotte",
    "Mexico", "Micronesia, Federated States Of", "Moldova, Republic Of", "Monaco", "Mongolia",
    "Montserrat", "Morocco", "Mozambique", "Myanmar", "Namibia", "Nauru", "Nepal", "Netherlands",
    "Netherlands Antilles", "New Caledonia", "New Zealand", "Nicaragua", "Niger", "Nigeria",
    "Niue", "Norfolk Island", "Northern Mariana Islands", "Norway", "Oman", "Pakistan", "Palau",
    "Panama", "Papua New Guinea", "Paraguay", "Peru", "Philippines", "Pitcairn", "Poland",
    "Portugal", "Puerto Rico", "Qatar", "Reunion", "Romania", "Russian Federation", "Rwanda",
    "Saint Kitts And Nevis", "Saint Lucia", "Saint Vincent And The Grenadines", "Samoa",
    "San Marino", "Sao Tome And Principe", "Saudi Arabia", "Senegal", "Seychelles",
    "Sierra Leone", "Singapore", "Slovakia (Slovak Republic)", "Slovenia", "Solomon Islands",
    "Somalia", "South Africa", "South Georgia, South Sandwich Islands", "Spain", "Sri Lanka",
    "St. Helena", "St. Pierre And Miquelon", "Sudan", "Suriname",
    "Svalbard And Jan Mayen Islands", "Swaziland", "Sweden", "Switzerland",
    "Syrian Arab Republic", "Taiwan", "Tajikistan", "Tanzania, United Republic Of", "Thailand",
    "Togo", "Tokelau", "Tonga", "Trinidad And Tobago", "Tunisia", "Turkey", "Turkmenistan",
    "Turks And Caicos Islands", "Tuvalu", "Uganda", "Ukraine", "United Arab Emirates",
    "United Kingdom", "United States Minor Outlying Islands", "Uruguay", "Uzbekistan",
    "Vanuatu", "Venezuela", "Viet Nam", "Virgin Islands (British)", "Virgin Islands (U.S.)",
    "Wallis And Futuna Islands", "Western Sahara", "Yemen", "Yugoslavia", "Zambia", "Zimbabwe",
)

_MINUTES = {
    "full": ("00",),
    "half": ("00", "30"),
    "quarter": ("00", "15", "30", "45"),
    "all": tuple(f"{m:02d}" for m in range(60)),
}


def states(use_abbrev: bool = True) -> Union[Dict[str, str], List[str]]:
    """US states keyed by abbreviation, or just the names."""
    return dict(STATES) if use_abbrev else list(STATES.values())


def provinces(use_abbrev: bool = True) -> Union[Dict[str, str], List[str]]:
    return dict(PROVINCES) if use_abbrev else list(PROVINCES.values())


def countries() -> List[str]:
    return list(COUNTRIES)


def times(minutes: str = "half") -> Dict[str, str]:
    """Times of day keyed "HH:MM:00" with 12-hour display ("01:30pm").

    minutes: "full", "half", "quarter" or "all"; unknown values mean "full".
    """
    options: Dict[str, str] = {}
    for hour in range(24):
        meridiem = "am" if hour < 12 else "pm"
        display_hour = 12 if hour == 0 else (hour - 12 if hour > 12 else hour)
        for minute in _MINUTES.get(minutes, _MINUTES["full"]):
            options[f"{hour:02d}:{minute}:00"] = f"{display_hour:02d}:{minute}{meridiem}"
    return options


__all__ = [
    "prep_options",
    "simple_options",
    "offset_options",
    "number_options",
    "states",
    "provinces",
    "countries",
    "times",
]
