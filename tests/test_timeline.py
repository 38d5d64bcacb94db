from app.crud.comments import create_comment
from app.crud.file_attachments import create_file_attachment
from app.services.hierarchy import SqlHierarchyReader
from app.services.timeline import files_and_comments


def test_lists_all_files_and_comments_in_creation_order(db_session, make_project):
    project = make_project()
    comment = create_comment(db_session, project, {"title": "test", "comment": "test"})
    attachment = create_file_attachment(
        db_session,
        project,
        {"filename": "tmp.txt", "content_type": "text/plain", "size_bytes": 4},
    )

    assert files_and_comments(SqlHierarchyReader(db_session), project) == [comment, attachment]


def test_entries_interleave_by_timestamp(db_session, make_project):
    project = make_project()
    late_comment = create_comment(
        db_session, project, {"comment": "late", "created_at": "2024-01-03T00:00:00.000000Z"}
    )
    early_file = create_file_attachment(
        db_session, project, {"filename": "a.pdf", "created_at": "2024-01-01T00:00:00.000000Z"}
    )
    middle_comment = create_comment(
        db_session, project, {"comment": "middle", "created_at": "2024-01-02T00:00:00.000000Z"}
    )

    timeline = files_and_comments(SqlHierarchyReader(db_session), project)

    assert timeline == [early_file, middle_comment, late_comment]


def test_timeline_is_scoped_to_the_project(db_session, make_project):
    project = make_project()
    other = make_project()
    create_comment(db_session, other, {"comment": "elsewhere"})
    create_file_attachment(db_session, other, {"filename": "other.txt"})

    assert files_and_comments(SqlHierarchyReader(db_session), project) == []


def test_attachment_filename_drops_directories(db_session, make_project):
    project = make_project()
    attachment = create_file_attachment(db_session, project, {"filename": "../../etc/notes.txt"})

    assert attachment.filename == "notes.txt"


def test_equal_timestamps_list_comments_before_files(db_session, make_project):
    project = make_project()
    stamp = "2024-02-01T12:00:00.000000Z"
    attachment = create_file_attachment(db_session, project, {"filename": "first.txt", "created_at": stamp})
    comment = create_comment(db_session, project, {"comment": "second", "created_at": stamp})

    timeline = files_and_comments(SqlHierarchyReader(db_session), project)

    assert timeline == [comment, attachment]
