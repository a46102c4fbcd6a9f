from flask import Blueprint, abort, jsonify, session
from flask_login import login_required
from app import db
from app.content import ItemProgress
from app.i18n import resolve, reveal_policy, t
from app.models import Section, Question
from app.utils import parse_bool, payload_value

bp = Blueprint("study", __name__)

def _progress_for(question_id: int) -> ItemProgress:
    data = session.get("item") or {}
    saved = ItemProgress(data.get("id"), bool(data.get("answered")))
    return saved.for_item(question_id)

def _save_progress(progress: ItemProgress):
    session["item"] = {"id": progress.item_id, "answered": progress.answered}

def _question_payload(q: Question, progress: ItemProgress) -> dict:
    plan = reveal_policy().plan(q.text_ar, q.text_it, progress.answered)
    data = {"id": q.id, "section_id": q.section_id, "answered": progress.answered}
    data.update(plan.as_dict())
    data["reveal_label"] = t("smart_learning.translation_label") if plan.reveal else None
    data["choices"] = {"true": t("quiz.true"), "false": t("quiz.false")}
    return data

@bp.get("/sections")
@login_required
def sections():
    rows = Section.query.order_by(Section.order.asc(), Section.id.asc()).all()
    if not rows:
        return jsonify({"sections": [], "empty": t("common.no_sections")})
    out = []
    for s in rows:
        out.append({
            "id": s.id,
            "title": [b.as_dict() for b in resolve(s.title_ar, s.title_it)],
            "questions": t("common.questions_count", count=len(s.questions)),
        })
    return jsonify({"sections": out})

@bp.get("/questions/<int:question_id>")
@login_required
def question(question_id: int):
    q = db.get_or_404(Question, question_id)
    progress = _progress_for(q.id)
    _save_progress(progress)
    return jsonify(_question_payload(q, progress))

@bp.post("/questions/<int:question_id>/answer")
@login_required
def answer(question_id: int):
    q = db.get_or_404(Question, question_id)
    given = parse_bool(payload_value("answer"))
    if given is None:
        abort(400, description="answer must be true or false")

    progress = _progress_for(q.id)
    progress.mark_answered()
    _save_progress(progress)

    correct = given == q.is_true
    data = _question_payload(q, progress)
    data.update({
        "correct": correct,
        "feedback": t("quiz.correct") if correct else t("quiz.incorrect"),
        "correct_answer": t("quiz.correct_answer", answer=t("quiz.true") if q.is_true else t("quiz.false")),
    })
    if q.explanation_ar or q.explanation_it:
        data["explanation"] = [b.as_dict() for b in resolve(q.explanation_ar, q.explanation_it)]
    return jsonify(data)
