from app.direction import DirectionalityController, DocumentAttributes, direction_for


def test_direction_for():
    assert direction_for("ar") == "rtl"
    assert direction_for("it") == "ltr"


def test_controller_writes_only_on_change():
    doc = DocumentAttributes()
    ctl = DirectionalityController(doc)
    ctl.apply("ar")
    ctl.apply("ar")
    assert (doc.lang, doc.dir, doc.writes) == ("ar", "rtl", 1)
    assert ctl.is_rtl
    ctl.apply("it")
    assert (doc.lang, doc.dir, doc.writes) == ("it", "ltr", 2)
    assert not ctl.is_rtl
