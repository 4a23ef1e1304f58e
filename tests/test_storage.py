import io
import os

from werkzeug.datastructures import FileStorage

from ayyavu.core.storage import save_upload, stored_name


def test_stored_name_is_timestamp_prefixed():
    assert stored_name("villa.jpg", now=1700000000.5) == "1700000000500-villa.jpg"


def test_stored_name_strips_path_components():
    name = stored_name("../../etc/passwd", now=1)
    assert name == "1000-etc_passwd"


def test_stored_name_falls_back_when_nothing_survives():
    assert stored_name("", now=2) == "2000-upload"


def test_save_upload_writes_before_returning(app, tmp_dir):
    upload_dir = os.path.join(tmp_dir, "content")
    file = FileStorage(stream=io.BytesIO(b"jpeg-bytes"), filename="tower.jpg")

    with app.app_context():
        ref = save_upload(file, upload_dir=upload_dir)

    assert ref.startswith("/uploads/")
    assert ref.endswith("-tower.jpg")
    with open(os.path.join(upload_dir, ref.rsplit("/", 1)[1]), "rb") as fh:
        assert fh.read() == b"jpeg-bytes"


def test_save_upload_uses_app_config(app):
    file = FileStorage(stream=io.BytesIO(b"x"), filename="site plan.png")

    with app.app_context():
        ref = save_upload(file)

    filename = ref.rsplit("/", 1)[1]
    assert filename.endswith("-site_plan.png")
    assert os.path.isfile(os.path.join(app.config["UPLOAD_FOLDER"], filename))
