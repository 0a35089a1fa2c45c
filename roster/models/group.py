from roster import db
from datetime import datetime
import uuid


class Group(db.Model):
    __tablename__ = 'groups'
    __table_args__ = (
        db.UniqueConstraint('user_id', 'school_id', 'group_name', name='uq_group_user_school_name'),
        db.Index('idx_groups_user_school', 'user_id', 'school_id'),
    )

    id = db.Column(db.Integer, primary_key=True)
    group_id = db.Column(db.String(36), unique=True, nullable=False, default=lambda: str(uuid.uuid4()))
    user_id = db.Column(db.String(64), db.ForeignKey('users.user_id', ondelete='CASCADE'), nullable=False, index=True)
    school_id = db.Column(db.String(20), nullable=False, index=True)  # not a foreign key: schools are replaced wholesale on import
    group_name = db.Column(db.String(100), nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    # Relationship: a group has many memberships, removed with the group
    members = db.relationship('GroupStudent', back_populates='group', cascade='all, delete-orphan',
                              order_by='GroupStudent.id', passive_deletes=True)

    @property
    def students(self):
        return [member.student for member in self.members]

    def to_dict(self):
        return {
            'id': self.id,
            'group_id': self.group_id,
            'user_id': self.user_id,
            'school_id': self.school_id,
            'group_name': self.group_name,
            'created_at': self.created_at.isoformat() if self.created_at else None,
            'updated_at': self.updated_at.isoformat() if self.updated_at else None
        }

    def __repr__(self):
        return f'<Group {self.group_name} ({self.school_id})>'


class GroupStudent(db.Model):
    __tablename__ = 'group_students'
    __table_args__ = (
        db.UniqueConstraint('group_id', 'student_id', name='uq_group_student'),
    )

    id = db.Column(db.Integer, primary_key=True)
    group_id = db.Column(db.Integer, db.ForeignKey('groups.id', ondelete='CASCADE'), nullable=False, index=True)
    student_id = db.Column(db.String(32), db.ForeignKey('students.student_id', ondelete='CASCADE'), nullable=False, index=True)
    added_at = db.Column(db.DateTime, default=datetime.utcnow)

    group = db.relationship('Group', back_populates='members')
    student = db.relationship('Student', back_populates='memberships')
