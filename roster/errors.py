class RosterError(Exception):
    """Base error carrying the HTTP status and a short client-visible message"""
    code = 500
    message = 'Internal server error'

    def __init__(self, message=None):
        super().__init__(message or self.message)
        if message:
            self.message = message


class ValidationError(RosterError):
    code = 400
    message = 'Invalid request'


class AuthenticationRequired(RosterError):
    code = 401
    message = 'Authentication required'


class AccessDenied(RosterError):
    code = 403
    message = 'Access denied'


class NotFound(RosterError):
    code = 404
    message = 'Not found'


class Conflict(RosterError):
    code = 409
    message = 'Already exists'
