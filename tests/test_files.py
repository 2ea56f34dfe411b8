import pytest
from fastapi.testclient import TestClient

from app.services.storage import AttachmentStorageService, LocalStorageBackend, get_attachment_storage
from main import app

client = TestClient(app)


@pytest.fixture
def storage(tmp_path):
    service = AttachmentStorageService(LocalStorageBackend(str(tmp_path), "/files"), "project-files")
    app.dependency_overrides[get_attachment_storage] = lambda: service
    yield service
    app.dependency_overrides.pop(get_attachment_storage, None)


class TestFileAttachments:
    def test_upload_stores_file_under_project(self, storage, tmp_path, hired_project, client_headers):
        response = client.post(
            f"/api/v1/files/project/{hired_project.id}",
            headers=client_headers,
            files={"file": ("Brief.PDF", b"%PDF-1.4 brief", "application/pdf")}
        )
        assert response.status_code == 201
        data = response.json()
        assert data["file_name"] == "Brief.PDF"
        assert data["file_size"] == len(b"%PDF-1.4 brief")
        assert data["file_url"].startswith(f"/files/project-files/{hired_project.id}/")
        assert data["file_url"].endswith(".pdf")

        stored = tmp_path / data["file_url"][len("/files/"):]
        assert stored.read_bytes() == b"%PDF-1.4 brief"

    def test_empty_upload_is_rejected(self, storage, hired_project, client_headers):
        response = client.post(
            f"/api/v1/files/project/{hired_project.id}",
            headers=client_headers,
            files={"file": ("empty.txt", b"", "text/plain")}
        )
        assert response.status_code == 400

    def test_outsider_cannot_upload(self, storage, hired_project, other_headers):
        response = client.post(
            f"/api/v1/files/project/{hired_project.id}",
            headers=other_headers,
            files={"file": ("notes.txt", b"hello", "text/plain")}
        )
        assert response.status_code == 403

    def test_list_project_files(self, storage, hired_project, client_headers, freelancer_headers):
        client.post(
            f"/api/v1/files/project/{hired_project.id}",
            headers=freelancer_headers,
            files={"file": ("draft.txt", b"v1", "text/plain")}
        )
        response = client.get(f"/api/v1/files/project/{hired_project.id}", headers=client_headers)
        files = response.json()
        assert len(files) == 1
        assert files[0]["uploader"]["full_name"] == "Frankie Freelancer"


def test_generated_names_are_unique(tmp_path):
    service = AttachmentStorageService(LocalStorageBackend(str(tmp_path)), "project-files")
    first = service.generate_filename(7, "a.png")
    second = service.generate_filename(7, "a.png")
    assert first != second
    assert first.startswith("project-files/7/")
