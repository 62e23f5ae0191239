import httpx

from plens.clients import HTTPSource, LocalSource
from plens.config import AppConfig, LoggingConfig, SourcesConfig
from plens.runtime import create_archive, create_source


def _config(**sources):
    return AppConfig(sources=SourcesConfig(**sources), logging=LoggingConfig())


def test_create_source_prefers_base_url(tmp_path):
    assert isinstance(create_source(_config(data_dir=str(tmp_path))), LocalSource)
    source = create_source(_config(data_dir=str(tmp_path), base_url="https://plens.example"))
    assert isinstance(source, HTTPSource)
    source.close()


def test_create_archive_from_directory(data_dir):
    archive = create_archive(_config(data_dir=str(data_dir)))

    assert len(archive.interventions) == 4
    assert len(archive.sessions) == 2


def test_create_archive_with_explicit_source(raw_documents):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=raw_documents[request.url.path.rsplit("/", 1)[-1]])

    source = HTTPSource("https://plens.example", transport=httpx.MockTransport(handler))
    archive = create_archive(_config(), source=source)
    source.close()

    assert [t.name for t in archive.tags] == ["Habitatge", "Mobilitat", "Cultura"]
