from roster import db
from datetime import datetime


class Student(db.Model):
    __tablename__ = 'students'

    EDITABLE_FIELDS = ('first_name', 'last_name', 'level', 'ethnicity', 'gender', 'nsn', 'language')

    student_id = db.Column(db.String(32), primary_key=True)
    first_name = db.Column(db.String(100), nullable=False)
    last_name = db.Column(db.String(150), nullable=False)
    level = db.Column(db.String(20), nullable=False)  # e.g. 'Year 7'
    ethnicity = db.Column(db.String(10), nullable=False)
    gender = db.Column(db.String(20), nullable=False)
    nsn = db.Column(db.String(9), unique=True, nullable=False)
    language = db.Column(db.String(10))
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    memberships = db.relationship('GroupStudent', back_populates='student',
                                  cascade='all', passive_deletes=True)

    def to_dict(self):
        return {
            'student_id': self.student_id,
            'first_name': self.first_name,
            'last_name': self.last_name,
            'level': self.level,
            'ethnicity': self.ethnicity,
            'gender': self.gender,
            'nsn': self.nsn,
            'language': self.language
        }

    def __repr__(self):
        return f'<Student {self.student_id}>'
