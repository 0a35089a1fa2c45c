from roster import db, login_manager
from flask_login import UserMixin
from datetime import datetime
from roster.errors import AuthenticationRequired
from roster.utils.tokens import load_token


class User(UserMixin, db.Model):
    __tablename__ = 'users'

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.String(64), unique=True, nullable=False, index=True)
    username = db.Column(db.String(50), unique=True)
    email = db.Column(db.String(120), unique=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    last_login = db.Column(db.DateTime)

    schools = db.relationship('UserSchool', backref='user', lazy=True,
                              cascade='all, delete-orphan', passive_deletes=True)

    @property
    def credential(self):
        """The credential the user signs in with (email for newer accounts, else username)"""
        return self.email or self.username

    def get_id(self):
        return self.user_id

    def to_dict(self):
        return {
            'user_id': self.user_id,
            'credential': self.credential
        }

    def __repr__(self):
        return f'<User {self.user_id}>'


class UserSchool(db.Model):
    __tablename__ = 'user_schools'
    __table_args__ = (
        db.UniqueConstraint('user_id', 'school_id', name='uq_user_school'),
    )

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.String(64), db.ForeignKey('users.user_id', ondelete='CASCADE'), nullable=False, index=True)
    school_id = db.Column(db.String(20), nullable=False, index=True)  # not a foreign key: schools are replaced wholesale on import
    added_at = db.Column(db.DateTime, default=datetime.utcnow)
    notes = db.Column(db.Text)


@login_manager.user_loader
def load_user(user_id):
    return User.query.filter_by(user_id=user_id).first()


@login_manager.request_loader
def load_user_from_request(request):
    """Resolve the caller from an ``Authorization: Bearer <token>`` header"""
    auth_header = request.headers.get('Authorization', '')
    if not auth_header.startswith('Bearer '):
        return None

    payload = load_token(auth_header[len('Bearer '):].strip())
    if not payload or not payload.get('user_id'):
        return None
    return User.query.filter_by(user_id=payload['user_id']).first()


@login_manager.unauthorized_handler
def unauthorized():
    raise AuthenticationRequired()
