"""
Application constants and enums.
"""

from enum import Enum

HTTP_ACCESS_TOKEN_HEADER = "access-token"
PREFIX_BASIC = "Basic "
PREFIX_BEARER = "Bearer "

CONTACT_NUMBER_LENGTH = 10
PASSWORD_MIN_LENGTH_EXCLUSIVE = 7
PINCODE_LENGTH = 6
NAME_MAX_LENGTH = 30
EMAIL_MAX_LENGTH = 50
CITY_MAX_LENGTH = 30
ADDRESS_LINE_MAX_LENGTH = 255
PASSWORD_HASH_ITERATIONS = 1000


class ItemType(str, Enum):
    VEG = "VEG"
    NON_VEG = "NON_VEG"


class ResponseStatus(str, Enum):
    CUSTOMER_CREATED = "CUSTOMER CREATED SUCCESSFULLY"
    LOGGED_IN = "LOGGED IN SUCCESSFULLY"
    LOGGED_OUT = "LOGGED OUT SUCCESSFULLY"
    CUSTOMER_UPDATED = "CUSTOMER DETAILS UPDATED SUCCESSFULLY"
    PASSWORD_UPDATED = "CUSTOMER PASSWORD UPDATED SUCCESSFULLY"
    ADDRESS_REGISTERED = "ADDRESS SUCCESSFULLY REGISTERED"
    ADDRESS_DELETED = "ADDRESS DELETED SUCCESSFULLY"
    ORDER_PLACED = "ORDER SUCCESSFULLY PLACED"
