import datetime as dt
from flask_login import UserMixin
from werkzeug.security import generate_password_hash, check_password_hash
from app import db

class User(db.Model, UserMixin):
    id = db.Column(db.Integer, primary_key=True)
    email = db.Column(db.String(200), unique=True, nullable=False)
    first_name = db.Column(db.String(120), nullable=False, default="")
    last_name = db.Column(db.String(120), nullable=True)
    role = db.Column(db.String(20), nullable=False, default="user")  # user|manager|admin
    password_hash = db.Column(db.String(255), nullable=True)

    # profile-level preferences; NULL means "not chosen yet"
    ui_language = db.Column(db.String(2), nullable=True)
    content_mode = db.Column(db.String(4), nullable=True)
    smart_learning = db.Column(db.Boolean, nullable=True)

    created_at = db.Column(db.DateTime, default=dt.datetime.utcnow)

    def set_password(self, pw: str):
        self.password_hash = generate_password_hash(pw)

    def check_password(self, pw: str) -> bool:
        return check_password_hash(self.password_hash or "", pw)

class Section(db.Model):
    id = db.Column(db.Integer, primary_key=True)
    title_ar = db.Column(db.String(200), nullable=False)
    title_it = db.Column(db.String(200), nullable=False)
    order = db.Column(db.Integer, default=0)
    created_at = db.Column(db.DateTime, default=dt.datetime.utcnow)

    questions = db.relationship("Question", backref="section", lazy=True, order_by="Question.id")

class Question(db.Model):
    id = db.Column(db.Integer, primary_key=True)
    section_id = db.Column(db.Integer, db.ForeignKey("section.id"), nullable=False)
    text_ar = db.Column(db.Text, nullable=False)
    text_it = db.Column(db.Text, nullable=False)
    explanation_ar = db.Column(db.Text, nullable=True)
    explanation_it = db.Column(db.Text, nullable=True)
    is_true = db.Column(db.Boolean, nullable=False)  # vero/falso
    created_at = db.Column(db.DateTime, default=dt.datetime.utcnow)
