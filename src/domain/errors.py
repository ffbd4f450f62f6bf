"""
Domain exceptions

Raised for caller contract violations and collaborator failures. Expected
business outcomes are returned as ``libs.result.Error`` values instead.
"""


class MissingScopeError(Exception):
    """A scoped action supplied neither an agency id nor a sub-account id"""

    def __init__(self, message: str = "You must provide an agency or sub-account id"):
        super().__init__(message)
        self.message = message


class IdentitySyncError(Exception):
    """The identity provider rejected or failed a role metadata update"""

    def __init__(self, caller_id: str, message: str):
        super().__init__(f"Identity sync failed for {caller_id}: {message}")
        self.caller_id = caller_id
        self.message = message


class ScopeMismatchError(Exception):
    """An action named an agency that does not own the given sub-account"""

    def __init__(self, agency_id, sub_account_id):
        self.message = f"Sub-account {sub_account_id} does not belong to agency {agency_id}"
        super().__init__(self.message)
        self.agency_id = agency_id
        self.sub_account_id = sub_account_id
