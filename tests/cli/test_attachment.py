"""Tests for 'moodboard attachment' commands."""

import json
from argparse import Namespace

from moodboard.cli.attachment import attachment_list, attachment_rm, attachment_upload


def test_attachment_upload_and_list(cli_client, capsys, tmp_path):
    path = tmp_path / "swatch.png"
    path.write_bytes(b"data")
    assert attachment_upload(Namespace(json=False, board="1", path=str(path))) == 0
    assert "Uploaded" in capsys.readouterr().out

    assert attachment_list(Namespace(json=False, board="1")) == 0
    out = capsys.readouterr().out
    assert "swatch.png" in out
    assert "2.0 KB" in out
    assert "http://backend.test/files/swatch.png" in out


def test_attachment_list_json(cli_client, capsys):
    cli_client.upload_attachment("1", "/tmp/a.pdf")
    assert attachment_list(Namespace(json=True, board="1")) == 0

    data = json.loads(capsys.readouterr().out)
    assert data[0]["fileName"] == "a.pdf"
    assert data[0]["fileSize"] == 2048
    assert "file_name" not in data[0]


def test_attachment_list_empty(cli_client, capsys):
    assert attachment_list(Namespace(json=False, board="1")) == 0
    assert "no attachments" in capsys.readouterr().out


def test_attachment_rm(cli_client, capsys):
    attachment = cli_client.upload_attachment("1", "/tmp/a.pdf")
    assert attachment_rm(Namespace(json=True, board="1", id=attachment.id)) == 0
    assert json.loads(capsys.readouterr().out) == {"id": attachment.id, "deleted": True}
    assert cli_client.attachments["1"] == []
