from flask import current_app
from itsdangerous import BadSignature, SignatureExpired, URLSafeTimedSerializer

TOKEN_SALT = 'roster-auth'


def _serializer():
    return URLSafeTimedSerializer(current_app.config['SECRET_KEY'], salt=TOKEN_SALT)


def issue_token(user):
    """Sign ``{user_id, credential}`` for the given user"""
    return _serializer().dumps({'user_id': user.user_id, 'credential': user.credential})


def load_token(token):
    """Return the token payload, or None when the signature is bad or the token has expired"""
    try:
        return _serializer().loads(token, max_age=current_app.config.get('TOKEN_MAX_AGE'))
    except SignatureExpired:
        current_app.logger.info('Rejected expired token')
        return None
    except BadSignature:
        return None
