"""Error handling utilities."""


class PropertyPalError(Exception):
    """Base exception for the listings backend."""
    pass


class SupabaseError(PropertyPalError):
    """Supabase operation error."""
    pass


class CsvImportError(PropertyPalError):
    """The uploaded CSV file could not be parsed as a whole."""
    pass


class AuthError(PropertyPalError):
    """Missing or invalid reviewer session."""
    pass


class ListingNotFoundError(PropertyPalError):
    """No listing exists for the requested ID."""
    pass
