from sqlalchemy import inspect

import quizbot.db.models  # noqa: F401  (binds the quizbot.db subpackage)
from quizbot import create_app
from quizbot.extensions import db


def test_create_app_can_run_twice():
    first = create_app("testing")
    second = create_app("testing")
    assert first is not second
    assert "quizzes.save" in second.view_functions


def test_init_db_command_creates_tables():
    app = create_app("testing")
    result = app.test_cli_runner().invoke(args=["init-db"])

    assert result.exit_code == 0, result.output
    with app.app_context():
        tables = inspect(db.engine).get_table_names()
        assert {"users", "quizzes"} <= set(tables)
        db.drop_all()
