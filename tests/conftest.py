import pytest

from app import create_app, db
from app.catalog import LocaleCatalog
from app.models import User, Section, Question

TREES = {
    "ar": {
        "nav": {"home": "الرئيسية", "lessons": "الدروس"},
        "quiz": {"question_count": "سؤال {{current}} من {{total}}"},
        "only_ar": "عربي فقط",
        "mixed": {"leaf": "ورقة"},
    },
    "it": {
        "nav": {"home": "Home", "lessons": "Lezioni"},
        "quiz": {"question_count": "Domanda {{current}} di {{total}}"},
        "only_it": "Solo italiano",
        "pair": "{{a}} and {{b}}",
        "mixed": "not a tree here",
    },
}


@pytest.fixture
def catalog():
    return LocaleCatalog(TREES)


@pytest.fixture
def app():
    # no app context is held open here: requests must each get a fresh `g`
    app = create_app({
        "TESTING": True,
        "SECRET_KEY": "test-secret",
        "SQLALCHEMY_DATABASE_URI": "sqlite:///:memory:",
        "I18N_DEBUG": True,
    })
    with app.app_context():
        db.create_all()
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


def make_user(app, email="student@example.com", password="Student@123", **settings):
    with app.app_context():
        u = User(email=email, first_name="Studente", **settings)
        u.set_password(password)
        db.session.add(u)
        db.session.commit()
        return u.id


@pytest.fixture
def user_id(app):
    return make_user(app)


@pytest.fixture
def question_id(app):
    with app.app_context():
        s = Section(title_ar="إشارات الأولوية", title_it="Segnali di precedenza", order=1)
        db.session.add(s)
        db.session.commit()
        q = Question(
            section_id=s.id,
            text_ar="إشارة قف تسمح بالمرور دون توقف",
            text_it="Lo stop consente di passare senza fermarsi",
            explanation_ar="يجب التوقف دائماً.",
            explanation_it="Bisogna sempre fermarsi.",
            is_true=False,
        )
        db.session.add(q)
        db.session.commit()
        return q.id


def login(client, email="student@example.com", password="Student@123", **kwargs):
    return client.post("/login", data={"email": email, "password": password}, **kwargs)
