"""Shared HTML fixtures."""

import logging

import pytest

VIDEO_URL = "https://developer.apple.com/videos/play/wwdc2024/10149/"
DOCUMENT_URL = "https://developer.apple.com/documentation/swiftui"

VIDEO_HTML = """<html><body>
<h1>Work with windows in SwiftUI</h1>
<section class="supplement details">
    <p>Learn how to create great single and multi-window apps.</p>
    <p>Second paragraph is ignored.</p>
</section>
<ul class="links small">
    <li class="document"><a href="https://developer.apple.com/documentation/swiftui/windows">Windows</a></li>
    <li class="download"><a href="https://example.com/sample.zip">Sample project</a></li>
    <li class="video"><a href="/videos/play/wwdc2023/10111/">Related session</a></li>
    <li class="other"><a href="https://example.com/forums">Forums</a></li>
    <li class="document"><span>No link here</span></li>
</ul>
<div class="sample-code-main-container">
    <p>2:12 - Opening a window</p>
    <pre><code>openWindow(id: "main")</code></pre>
</div>
<div class="sample-code-main-container">
    <p>Configuring targets</p>
    <pre><code>let x = 1</code></pre>
</div>
<div class="sample-code-main-container">
    <p>Missing code element</p>
</div>
<section class="supplement transcript">
    <span class="sentence">Hello and welcome.</span>
    <span class="sentence">Let's get started.</span>
</section>
</body></html>"""

DOCUMENT_HTML = """<html><head>
<meta name="description" content="Declare the user interface and behavior for your app.">
</head><body>
<h1>SwiftUI</h1>
<div class="content"><p>SwiftUI provides views, controls, and layout structures.</p></div>
<div class="content"><p>Second overview paragraph.</p></div>
<aside class="note">
    <p class="label">Important</p>
    <p>Requires iOS 17.</p>
    <p>And macOS 14.</p>
</aside>
<section class="contenttable-section">
    <h3 class="contenttable-title">Essentials</h3>
    <div class="link-block">
        <a class="link" href="/documentation/swiftui/app"><code>Ap&#8203;p</code></a>
        <div class="content">A type that represents the structure and behavior of an app.</div>
        <span class="decorator">protocol</span>
    </div>
    <div class="link-block">
        <a class="link" href="/documentation/swiftui/learning-swiftui"><span>Learning SwiftUI</span></a>
    </div>
</section>
</body></html>"""


@pytest.fixture
def video_html():
    """Markup of a session video page."""
    return VIDEO_HTML


@pytest.fixture
def document_html():
    """Rendered markup of a reference page."""
    return DOCUMENT_HTML


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Drop handlers bound to captured streams once a test finishes."""
    yield
    logger = logging.getLogger("wwdc2md")
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
