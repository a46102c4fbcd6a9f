from app import create_app, db
from app.schema import ensure_schema
from app.models import User, Section, Question

def main():
    app = create_app()
    with app.app_context():
        db.create_all()
        ensure_schema()

        if not User.query.filter_by(email="admin@example.com").first():
            u = User(email="admin@example.com", first_name="Admin", role="admin")
            u.set_password("Admin@123")
            db.session.add(u)

        if not User.query.filter_by(email="student@example.com").first():
            # profile settings left NULL so device/browser preferences apply
            s = User(email="student@example.com", first_name="Studente", role="user")
            s.set_password("Student@123")
            db.session.add(s)

        db.session.commit()

        if not Section.query.first():
            signs = Section(title_ar="إشارات الخطر", title_it="Segnali di pericolo", order=1)
            priority = Section(title_ar="إشارات الأولوية", title_it="Segnali di precedenza", order=2)
            db.session.add_all([signs, priority])
            db.session.commit()

            db.session.add_all([
                Question(
                    section_id=signs.id,
                    text_ar="إشارة المنعطف الخطير تحذر من منعطف إلى اليمين",
                    text_it="Il segnale di curva pericolosa preannuncia una curva a destra",
                    explanation_ar="الإشارة تشير إلى منعطف خطير في الاتجاه المرسوم.",
                    explanation_it="Il segnale indica una curva pericolosa nella direzione raffigurata.",
                    is_true=True,
                ),
                Question(
                    section_id=priority.id,
                    text_ar="إشارة قف تسمح بالمرور دون توقف إذا كان الطريق خالياً",
                    text_it="Il segnale di stop consente di passare senza fermarsi se la strada è libera",
                    explanation_ar="عند إشارة قف يجب التوقف دائماً.",
                    explanation_it="Allo stop bisogna sempre fermarsi.",
                    is_true=False,
                ),
            ])
            db.session.commit()

        print("Seed completed.")
        print("Admin: admin@example.com / Admin@123")
        print("Student: student@example.com / Student@123")

if __name__ == "__main__":
    main()
