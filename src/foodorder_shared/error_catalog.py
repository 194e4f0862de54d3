"""
Central catalogue of the controlled errors returned by the food ordering API.

Codes are stable and part of the public contract: clients switch on `code`,
the message is informational.
"""

ERROR_CATALOG = {
    # Generic
    "GEN-001": "An unexpected error occurred. Please contact System Administrator",
    "GEN-002": "Invalid request payload",
    "GEN-003": "Resource not found",
    "GEN-004": "Method not allowed",
    # Signup
    "SGR-001": "This contact number is already registered! Try other contact number.",
    "SGR-002": "Invalid email-id format!",
    "SGR-003": "Invalid contact number!",
    "SGR-004": "Weak password!",
    "SGR-005": "Except last name all fields should be filled",
    "SGR-006": "First name and last name can be at most 30 characters",
    # Authentication (login)
    "ATH-002": "Invalid Credentials",
    "ATH-003": "Incorrect format of decoded customer name and password",
    "ATH-004": "Prefix 'Basic ' missing on Authentication Token",
    # Authorization (bearer token)
    "ATHR-001": "Customer is not Logged in.",
    "ATHR-002": "Customer is logged out. Log in again to access this endpoint.",
    "ATHR-003": "Your session is expired. Log in again to access this endpoint.",
    "ATHR-004": "You are not authorized to view/update/delete any one else's address",
    "ATHR-005": "Prefix 'Bearer ' missing on Access/Authorization token",
    # Customer update
    "UCR-001": "Weak password!",
    "UCR-002": "First name field should not be empty",
    "UCR-003": "No field should be empty",
    "UCR-004": "Incorrect old password!",
    "UCR-005": "First name and last name can be at most 30 characters",
    # Address
    "SAR-001": "No field can be empty",
    "SAR-002": "Invalid pincode",
    "SAR-003": "Address field is too long",
    "ANF-002": "No state by this id",
    "ANF-003": "No address by this id",
    "ANF-005": "Address id can not be empty",
    # Catalogue lookups
    "CNF-001": "Category id field should not be empty",
    "CNF-002": "No category by this id",
    "CPF-001": "No coupon by this name",
    "CPF-002": "Coupon name field should not be empty",
    "CPF-003": "No coupon by this id",
    "RNF-001": "No restaurant by this id",
    "RNF-002": "Restaurant id field should not be empty",
    "IRE-001": "Restaurant should be in the range of 1 to 5",
    "PNF-002": "No payment method found by this id",
    "INF-001": "No item by this id exist",
}


def message_for(code: str) -> str:
    """Default message for a catalogue code; unknown codes get the generic one."""
    return ERROR_CATALOG.get(code, ERROR_CATALOG["GEN-001"])
