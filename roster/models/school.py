from roster import db


class School(db.Model):
    __tablename__ = 'schools'

    id = db.Column(db.Integer, primary_key=True)
    school_id = db.Column(db.String(20), unique=True, nullable=False, index=True)  # Ministry registry code
    school_name = db.Column(db.String(200), nullable=False)
    address = db.Column(db.String(200))
    suburb = db.Column(db.String(100))
    town = db.Column(db.String(100))
    postcode = db.Column(db.String(20))
    phone = db.Column(db.String(40))
    email = db.Column(db.String(120))
    website = db.Column(db.String(256))
    principal = db.Column(db.String(120))
    school_type = db.Column(db.String(100))
    authority = db.Column(db.String(100))
    decile = db.Column(db.Integer, default=0)  # 1-10, 0 when unknown
    roll_number = db.Column(db.Integer, default=0)
    gender = db.Column(db.String(40))
    is_primary = db.Column(db.Boolean, default=False)
    is_secondary = db.Column(db.Boolean, default=False)
    is_composite = db.Column(db.Boolean, default=False)
    org_code = db.Column(db.String(20))
    takiwa = db.Column(db.String(100))
    local_body = db.Column(db.String(100))

    COLUMNS = (
        'school_id', 'school_name', 'address', 'suburb', 'town', 'postcode', 'phone',
        'email', 'website', 'principal', 'school_type', 'authority', 'decile',
        'roll_number', 'gender', 'is_primary', 'is_secondary', 'is_composite',
        'org_code', 'takiwa', 'local_body',
    )

    def to_dict(self):
        data = {'id': self.id}
        for column in self.COLUMNS:
            data[column] = getattr(self, column)
        return data

    def __repr__(self):
        return f'<School {self.school_id}: {self.school_name}>'
