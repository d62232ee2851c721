"""
Pytest configuration for unit tests.

Provides sample RFC bodies in both wire formats and a fake transport so no
unit test touches the network.
"""

import pytest
from unittest.mock import Mock

from rfc_text.config import SourcesConfig
from rfc_text.exceptions import TransportFailure


SAMPLE_HTML = """<!DOCTYPE html>
<html>
<head><title>RFC 9999</title></head>
<body>
<h1>Example Protocol Framework</h1>
<div class="authors">
  <span class="author">A. Author</span>
  <span class="author">   </span>
  <span class="author">B. Writer</span>
</div>
<p class="pubdate">March 2024</p>
<p class="status">Standards Track</p>
<div class="abstract"><p>This document specifies an example protocol.</p></div>
<section id="section-1">
  <h2>1. Introduction</h2>
  <p>Intro text.</p>
</section>
<section id="section-2">
  <h2>2. Protocol</h2>
  <p>Overview.</p>
  <section id="section-2.1">
    <h3>2.1. Framing</h3>
    <p>Frames.</p>
  </section>
  <div>
    <section id="section-2.2">
      <h4>2.2. Errors</h4>
      <p>Errors.</p>
    </section>
  </div>
  <section id="section-2.3"><p>Untitled.</p></section>
</section>
<section id="boilerplate"><p>No heading here.</p></section>
</body>
</html>
"""


SAMPLE_TEXT = """Title: Example Protocol Framework

Authors:
   A. Author
   B. Writer

Date: March 2024
Category: Standards Track

Abstract

   This document specifies an example protocol
   for testing purposes.

Status of This Memo

   This is an Internet Standards Track document.

1.  Introduction

   The example protocol is simple.

2.  Protocol Overview
2.1.  Framing

   Frames are delimited.

3.  Security Considerations

   None.
"""


TEST_SOURCES = dict(
    base_url="https://rfc.test/rfc",
    html_url_template="{base_url}/rfc{number}.html",
    text_url_template="{base_url}/rfc{number}.txt",
)


@pytest.fixture
def sample_html() -> str:
    return SAMPLE_HTML


@pytest.fixture
def sample_text() -> str:
    return SAMPLE_TEXT


@pytest.fixture
def sources() -> SourcesConfig:
    """Sources config pointing at a fake host."""
    return SourcesConfig(**TEST_SOURCES)


@pytest.fixture
def make_transport():
    """
    Build a fake transport from a url -> body mapping.

    A body that is an Exception instance is raised instead of returned;
    URLs missing from the mapping raise TransportFailure (like a 404).
    """
    def _make(responses: dict) -> Mock:
        def fetch(url):
            body = responses.get(url)
            if body is None:
                raise TransportFailure(url, "404 Client Error: Not Found")
            if isinstance(body, Exception):
                raise body
            return body

        transport = Mock()
        transport.fetch = Mock(side_effect=fetch)
        return transport

    return _make
