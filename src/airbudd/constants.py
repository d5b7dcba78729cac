"""
Constants for AirBudd form rendering.

This module contains the fixed vocabularies used by the builders: field
kinds and their wrapper classes, option keys consumed by the wrapper,
button purposes, and the country list for country selects.
"""

from enum import Enum
from typing import NamedTuple


class FieldKind(str, Enum):
    """Field helpers decorated by the AirBudd form builder."""

    TEXT_FIELD = "text_field"
    TEXT_AREA = "text_area"
    PASSWORD_FIELD = "password_field"
    FILE_FIELD = "file_field"
    DATE_SELECT = "date_select"
    DATETIME_SELECT = "datetime_select"
    TIME_SELECT = "time_select"
    COUNTRY_SELECT = "country_select"
    SELECT = "select"
    COLLECTION_SELECT = "collection_select"
    CHECK_BOX = "check_box"
    RADIO_BUTTON = "radio_button"
    READ_ONLY_TEXT_FIELD = "read_only_text_field"


# Class tag added to the wrapping <p> for each kind
KIND_CLASSES = {
    FieldKind.TEXT_FIELD: "text",
    FieldKind.TEXT_AREA: "textarea",
    FieldKind.PASSWORD_FIELD: "password",
    FieldKind.FILE_FIELD: "file",
    FieldKind.DATE_SELECT: "date",
    FieldKind.DATETIME_SELECT: "datetime",
    FieldKind.TIME_SELECT: "time",
    FieldKind.COUNTRY_SELECT: "select",
    FieldKind.SELECT: "select",
    FieldKind.COLLECTION_SELECT: "select",
    FieldKind.CHECK_BOX: "checkbox",
    FieldKind.RADIO_BUTTON: "radio",
    FieldKind.READ_ONLY_TEXT_FIELD: "read_only",
}

# Kinds whose label follows the control
SHORT_KINDS = frozenset({FieldKind.CHECK_BOX, FieldKind.RADIO_BUTTON})

# Option keys the wrapper consumes; never forwarded to the host helper
WRAPPER_OPTION_KEYS = frozenset({"label", "suffix", "required", "hint", "addendum", "capitalize"})


class Purpose(str, Enum):
    """Intent of an action button or link."""

    NEW = "new"
    SAVE = "save"
    CANCEL = "cancel"
    EDIT = "edit"
    DELETE = "delete"


class ButtonStyle(NamedTuple):
    """How a purpose is drawn."""

    element: str  # "a" or "button"
    icon: str
    nature: str | None


BUTTON_STYLES = {
    Purpose.NEW: ButtonStyle("a", "add", "positive"),
    Purpose.SAVE: ButtonStyle("button", "tick", "positive"),
    Purpose.CANCEL: ButtonStyle("a", "arrow_undo", None),
    Purpose.EDIT: ButtonStyle("a", "pencil", None),
    Purpose.DELETE: ButtonStyle("button", "cross", "negative"),
}

# Purposes link_to_form can draw; all as links
LINK_PURPOSES = frozenset({Purpose.NEW, Purpose.EDIT, Purpose.DELETE, Purpose.CANCEL})

MONTH_NAMES = [
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
]

COUNTRIES = [
    "Afghanistan", "Aland Islands", "Albania", "Algeria", "American Samoa",
    "Andorra", "Angola", "Anguilla", "Antarctica", "Antigua And Barbuda",
    "Argentina", "Armenia", "Aruba", "Australia", "Austria", "Azerbaijan",
    "Bahamas", "Bahrain", "Bangladesh", "Barbados", "Belarus", "Belgium",
    "Belize", "Benin", "Bermuda", "Bhutan", "Bolivia", "Bosnia and Herzegowina",
    "Botswana", "Bouvet Island", "Brazil", "British Indian Ocean Territory",
    "Brunei Darussalam", "Bulgaria", "Burkina Faso", "Burundi", "Cambodia",
    "Cameroon", "Canada", "Cape Verde", "Cayman Islands",
    "Central African Republic", "Chad", "Chile", "China", "Christmas Island",
    "Cocos (Keeling) Islands", "Colombia", "Comoros", "Congo",
    "Congo, the Democratic Republic of the", "Cook Islands", "Costa Rica",
    "Cote d'Ivoire", "Croatia", "Cuba", "Cyprus", "Czech Republic", "Denmark",
    "Djibouti", "Dominica", "Dominican Republic", "Ecuador", "Egypt",
    "El Salvador", "Equatorial Guinea", "Eritrea", "Estonia", "Ethiopia",
    "Falkland Islands (Malvinas)", "Faroe Islands", "Fiji", "Finland", "France",
    "French Guiana", "French Polynesia", "French Southern Territories", "Gabon",
    "Gambia", "Georgia", "Germany", "Ghana", "Gibraltar", "Greece", "Greenland",
    "Grenada", "Guadeloupe", "Guam", "Guatemala", "Guernsey", "Guinea",
    "Guinea-Bissau", "Guyana", "Haiti", "Heard and McDonald Islands",
    "Holy See (Vatican City State)", "Honduras", "Hong Kong", "Hungary",
    "Iceland", "India", "Indonesia", "Iran, Islamic Republic of", "Iraq",
    "Ireland", "Isle of Man", "Israel", "Italy", "Jamaica", "Japan", "Jersey",
    "Jordan", "Kazakhstan", "Kenya", "Kiribati",
    "Korea, Democratic People's Republic of", "Korea, Republic of", "Kuwait",
    "Kyrgyzstan", "Lao People's Democratic Republic", "Latvia", "Lebanon",
    "Lesotho", "Liberia", "Libyan Arab Jamahiriya", "Liechtenstein",
    "Lithuania", "Luxembourg", "Macao", "Macedonia, The Former Yugoslav Republic Of",
    "Madagascar", "Malawi", "Malaysia", "Maldives", "Mali", "Malta",
    "Marshall Islands", "Martinique", "Mauritania", "Mauritius", "Mayotte",
    "Mexico", "Micronesia, Federated States of", "Moldova, Republic of",
    "Monaco", "Mongolia", "Montenegro", "Montserrat", "Morocco", "Mozambique",
    "Myanmar", "Namibia", "Nauru", "Nepal", "Netherlands", "Netherlands Antilles",
    "New Caledonia", "New Zealand", "Nicaragua", "Niger", "Nigeria", "Niue",
    "Norfolk Island", "Northern Mariana Islands", "Norway", "Oman", "Pakistan",
    "Palau", "Palestinian Territory, Occupied", "Panama", "Papua New Guinea",
    "Paraguay", "Peru", "Philippines", "Pitcairn", "Poland", "Portugal",
    "Puerto Rico", "Qatar", "Reunion", "Romania", "Russian Federation",
    "Rwanda", "Saint Barthelemy", "Saint Helena", "Saint Kitts and Nevis",
    "Saint Lucia", "Saint Pierre and Miquelon",
    "Saint Vincent and the Grenadines", "Samoa", "San Marino",
    "Sao Tome and Principe", "Saudi Arabia", "Senegal", "Serbia", "Seychelles",
    "Sierra Leone", "Singapore", "Slovakia", "Slovenia", "Solomon Islands",
    "Somalia", "South Africa", "South Georgia and the South Sandwich Islands",
    "Spain", "Sri Lanka", "Sudan", "Suriname", "Svalbard and Jan Mayen",
    "Swaziland", "Sweden", "Switzerland", "Syrian Arab Republic",
    "Taiwan, Province of China", "Tajikistan", "Tanzania, United Republic of",
    "Thailand", "Timor-Leste", "Togo", "Tokelau", "Tonga", "Trinidad and Tobago",
    "Tunisia", "Turkey", "Turkmenistan", "Turks and Caicos Islands", "Tuvalu",
    "Uganda", "Ukraine", "United Arab Emirates", "United Kingdom",
    "United States", "United States Minor Outlying Islands", "Uruguay",
    "Uzbekistan", "Vanuatu", "Venezuela", "Viet Nam", "Virgin Islands, British",
    "Virgin Islands, U.S.", "Wallis and Futuna", "Western Sahara", "Yemen",
    "Zambia", "Zimbabwe",
]
