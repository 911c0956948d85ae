"""Tests for alignment API endpoints."""

from fastapi import status


class TestAlignedRows:
    """Test the aligned table of stored tracks."""

    def test_rows_empty(self, client):
        """Test no tracks means no columns and no rows."""
        response = client.get("/api/v1/rows")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"columns": [], "rows": []}

    def test_rows_after_adding_tracks(self, client, sample_srt, sample_srt_translated):
        """Test adding tracks recomputes the merged table."""
        client.post("/api/v1/tracks", json={"name": "en.srt", "content": sample_srt})
        client.post("/api/v1/tracks", json={"name": "es.srt", "content": sample_srt_translated})

        data = client.get("/api/v1/rows").json()

        assert data["columns"] == ["en.srt", "es.srt"]
        assert data["rows"] == [
            {"time": 1000, "pretty_time": "00:00:01", "captions": ["Hello world", "Hola mundo"]},
            {
                "time": 5000,
                "pretty_time": "00:00:05",
                "captions": ["How are you?", "¿Cómo estás?"],
            },
        ]

    def test_rows_are_stable(self, client, sample_srt):
        """Test reading the table twice gives the same result."""
        client.post("/api/v1/tracks", json={"name": "a.srt", "content": sample_srt})

        assert client.get("/api/v1/rows").json() == client.get("/api/v1/rows").json()


class TestAlign:
    """Test stateless alignment."""

    def test_align_two_tracks(self, client):
        """Test disjoint cues from two tracks land in separate rows."""
        response = client.post(
            "/api/v1/align",
            json={
                "tracks": [
                    {"name": "A", "content": "1\n00:00:00,000 --> 00:00:01,000\nA1\n"},
                    {"name": "B", "content": "1\n00:00:02,000 --> 00:00:03,000\nB1\n"},
                ]
            },
        )

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["columns"] == ["A", "B"]
        assert [row["captions"] for row in data["rows"]] == [["A1", ""], ["", "B1"]]
        assert [row["time"] for row in data["rows"]] == [0, 2000]
        assert [track["entry_count"] for track in data["tracks"]] == [1, 1]

    def test_align_reports_diagnostics(self, client, truncated_srt, sample_srt):
        """Test truncated tracks are aligned with whatever was parsed."""
        response = client.post(
            "/api/v1/align",
            json={
                "tracks": [
                    {"name": "broken", "content": truncated_srt},
                    {"name": "good", "content": sample_srt},
                ]
            },
        )

        data = response.json()
        assert data["tracks"][0]["truncated"] is True
        assert data["tracks"][0]["diagnostics"][0]["line"] == "NOT-A-TIME"
        assert data["rows"][0]["captions"] == ["Hello", "Hello world"]

    def test_align_does_not_store_tracks(self, client, sample_srt):
        """Test stateless alignment leaves the track store untouched."""
        client.post("/api/v1/align", json={"tracks": [{"name": "a", "content": sample_srt}]})

        assert client.get("/api/v1/tracks").json() == {"tracks": []}

    def test_align_no_tracks(self, client):
        """Test an empty request yields an empty table."""
        response = client.post("/api/v1/align", json={"tracks": []})

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"columns": [], "rows": [], "tracks": []}

    def test_align_missing_tracks_field(self, client):
        """Test request validation."""
        response = client.post("/api/v1/align", json={})
        assert response.status_code == 422

    def test_align_lone_surrogate_content(self, client):
        """Test content with an unpaired surrogate escape is rejected."""
        body = (
            b'{"tracks": [{"name": "a", "content": "1\\n00:00:00,000 --> 00:00:01,000\\n'
            b'\\ud83d"}]}'
        )

        response = client.post(
            "/api/v1/align", content=body, headers={"Content-Type": "application/json"}
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert "valid UTF-8" in response.json()["detail"]

    def test_align_unexpected_error(self, client, sample_srt, monkeypatch):
        """Test unexpected failures are reported as 500 with the error message."""

        def fail(tracks):
            raise RuntimeError("boom")

        monkeypatch.setattr("app.api.v1.alignment.compute_aligned_rows", fail)

        response = client.post(
            "/api/v1/align", json={"tracks": [{"name": "a", "content": sample_srt}]}
        )

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.json()["detail"] == "Unexpected error: boom"
