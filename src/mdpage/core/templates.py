"""Page templates: embedded stylesheet, client script and document skeletons"""

from string import Template


PALETTE_CSS = """\
    :root {
      color-scheme: light dark;
      --bg: #f5f7fa;
      --card: #ffffff;
      --fg: #1f2732;
      --muted: #44505d;
      --accent: #0f6fd6;
      --border: rgba(33, 43, 54, 0.14);
      --quote: #2f6db0;
      --code-bg: #eff3f8;
      --code-fg: #1b2330;
      --shadow: 0 20px 55px rgba(10, 18, 28, 0.08);
      --toc-bg: rgba(255, 255, 255, 0.74);
      --toc-active-bg: rgba(20, 108, 200, 0.12);
      --toc-active-fg: #0f5fba;
      --fm-bg: rgba(15, 111, 214, 0.05);
      --fm-border: rgba(15, 111, 214, 0.35);
      --fm-summary-bg: rgba(15, 111, 214, 0.08);
      --yaml-key: #0b67c0;
      --yaml-string: #9d5f1f;
      --yaml-number: #1f70a8;
      --yaml-bool: #7b3fb4;
      --yaml-null: #cc5500;
      --yaml-punct: #607086;
      --yaml-comment: #7d8795;
    }
    @media (prefers-color-scheme: dark) {
      :root {
        --bg: #0f141b;
        --card: #131b24;
        --fg: #dde5ef;
        --muted: #afbdce;
        --accent: #66b3ff;
        --border: rgba(214, 225, 238, 0.2);
        --quote: #8ec5ff;
        --code-bg: #1a2430;
        --code-fg: #dde7f3;
        --shadow: 0 26px 68px rgba(0, 0, 0, 0.35);
        --toc-bg: rgba(18, 25, 34, 0.78);
        --toc-active-bg: rgba(102, 179, 255, 0.2);
        --toc-active-fg: #90c9ff;
        --fm-bg: rgba(102, 179, 255, 0.1);
        --fm-border: rgba(102, 179, 255, 0.38);
        --fm-summary-bg: rgba(102, 179, 255, 0.13);
        --yaml-key: #79c0ff;
        --yaml-string: #f2a97f;
        --yaml-number: #a5d6ff;
        --yaml-bool: #d2a8ff;
        --yaml-null: #ffb86b;
        --yaml-punct: #93a3b6;
        --yaml-comment: #7d8590;
      }
    }
    html, body {
      margin: 0;
      min-height: 100%;
      background:
        radial-gradient(circle at 14% 14%, rgba(96, 153, 224, 0.16), transparent 44%),
        radial-gradient(circle at 86% 12%, rgba(35, 140, 191, 0.11), transparent 38%),
        var(--bg);
      color: var(--fg);
      font-family: "Avenir Next", "Charter", "Iowan Old Style", serif;
    }
"""

DOCUMENT_CSS = PALETTE_CSS + """\
    .layout {
      width: calc(100% - 44px);
      margin: 28px 22px 40px;
      box-sizing: border-box;
      display: grid;
      grid-template-columns: minmax(220px, 290px) minmax(0, 1fr);
      gap: 22px;
      align-items: start;
    }
    .layout.no-toc { grid-template-columns: minmax(0, 1fr); }
    .toc-panel {
      position: sticky;
      top: 14px;
      max-height: calc(100vh - 28px);
      overflow: auto;
      border: 1px solid var(--border);
      border-radius: 16px;
      background: var(--toc-bg);
      backdrop-filter: blur(8px);
      box-shadow: var(--shadow);
      padding: 12px;
    }
    .toc-title {
      margin: 2px 8px 8px;
      font-family: "Avenir Next Demi Bold", "Gill Sans", sans-serif;
      letter-spacing: 0.02em;
      font-size: 0.93rem;
      text-transform: uppercase;
    }
    .toc-links { display: flex; flex-direction: column; gap: 2px; }
    .toc-link {
      display: block;
      color: var(--muted);
      text-decoration: none;
      line-height: 1.35;
      border-radius: 9px;
      padding: 6px 8px;
      font-size: 0.93rem;
      border: 1px solid transparent;
    }
    .toc-link:hover { color: var(--fg); border-color: var(--border); }
    .toc-link.active {
      color: var(--toc-active-fg);
      background: var(--toc-active-bg);
      border-color: transparent;
    }
    .toc-link.level-1 { padding-left: 8px; font-weight: 650; }
    .toc-link.level-2 { padding-left: 16px; }
    .toc-link.level-3 { padding-left: 24px; }
    .toc-link.level-4 { padding-left: 32px; }
    .toc-link.level-5 { padding-left: 40px; }
    .toc-link.level-6 { padding-left: 48px; }
    .wrap {
      border: 1px solid var(--border);
      border-radius: 18px;
      background: var(--card);
      box-shadow: var(--shadow);
      padding: 30px 34px;
      min-height: calc(100vh - 86px);
    }
    .frontmatter-details {
      margin: 0 0 1.15rem;
      border: 1px solid var(--fm-border);
      border-left: 4px solid var(--fm-border);
      border-radius: 12px;
      background: var(--fm-bg);
      overflow: hidden;
    }
    .frontmatter-summary {
      cursor: pointer;
      padding: 0.62rem 0.78rem;
      font-family: "Avenir Next Demi Bold", "Gill Sans", sans-serif;
      font-size: 0.95rem;
      background: var(--fm-summary-bg);
      user-select: none;
    }
    .frontmatter-details[open] .frontmatter-summary { border-bottom: 1px solid var(--border); }
    .frontmatter-pre { margin: 0; padding: 0.72rem 0.84rem 0.86rem; background: transparent; overflow: auto; }
    .frontmatter-code { display: block; white-space: pre; line-height: 1.48; font-size: 0.915rem; }
    .yaml-key { color: var(--yaml-key); }
    .yaml-string { color: var(--yaml-string); }
    .yaml-number { color: var(--yaml-number); }
    .yaml-bool { color: var(--yaml-bool); }
    .yaml-null { color: var(--yaml-null); }
    .yaml-punct { color: var(--yaml-punct); }
    .yaml-comment { color: var(--yaml-comment); }
    h1, h2, h3, h4, h5, h6 {
      margin: 1.1em 0 0.52em;
      line-height: 1.2;
      font-family: "Avenir Next Demi Bold", "Gill Sans", sans-serif;
      scroll-margin-top: 22px;
    }
    h1 { font-size: 2rem; margin-top: 0.1em; }
    h2 { font-size: 1.55rem; }
    h3 { font-size: 1.3rem; }
    p, li, td, th { color: var(--muted); line-height: 1.67; font-size: 1.04rem; overflow-wrap: anywhere; }
    a { color: var(--accent); text-decoration-thickness: 1.5px; text-underline-offset: 3px; }
    img {
      display: block;
      max-width: 100%;
      height: auto;
      margin: 18px auto;
      border-radius: 12px;
      border: 1px solid var(--border);
    }
    pre, code { font-family: "SF Mono", "Menlo", "SFMono-Regular", monospace; }
    code { padding: 0.18em 0.35em; border-radius: 6px; background: var(--code-bg); color: var(--code-fg); font-size: 0.92em; }
    pre {
      overflow-x: auto;
      border-radius: 10px;
      border: 1px solid var(--border);
      background: var(--code-bg);
      padding: 13px 14px;
    }
    pre code { padding: 0; background: transparent; white-space: pre; }
    blockquote { margin: 1rem 0; padding: 0.15rem 0 0.15rem 1rem; border-left: 3px solid var(--quote); }
    table { width: 100%; border-collapse: collapse; margin: 14px 0; }
    th, td { border: 1px solid var(--border); padding: 0.45rem 0.6rem; text-align: left; vertical-align: top; }
    hr { border: none; border-top: 1px solid var(--border); margin: 1.5rem 0; }
    @media (max-width: 980px) {
      .layout { grid-template-columns: 1fr; gap: 14px; width: calc(100% - 24px); margin: 20px 12px 30px; }
      .toc-panel { position: static; max-height: none; }
      .wrap { min-height: auto; padding: 24px 20px; }
    }
"""

# Scroll-spy and anchor navigation. initialFragment wins over location.hash on load.
CLIENT_JS = """\
    (() => {
      const initialFragment = "$initial_fragment";
      const tocLinks = Array.from(document.querySelectorAll(".toc-link"));

      const normalizeFragment = (value) => {
        if (!value) return "";
        const raw = value.startsWith("#") ? value.slice(1) : value;
        try { return decodeURIComponent(raw); } catch { return raw; }
      };

      const sections = [];
      for (const link of tocLinks) {
        const id = normalizeFragment(link.getAttribute("href") || "");
        const target = id && document.getElementById(id);
        if (target) sections.push({ id, link, target });
      }

      const setActive = (id) => {
        if (!id) return;
        for (const link of tocLinks) {
          link.classList.toggle("active", normalizeFragment(link.getAttribute("href") || "") === id);
        }
      };

      const scrollToFragment = (fragment) => {
        const id = normalizeFragment(fragment);
        const target = id && document.getElementById(id);
        if (!target) return false;
        target.scrollIntoView({ block: "start", inline: "nearest" });
        setActive(id);
        return true;
      };

      const updateActiveByScroll = () => {
        if (!sections.length) return;
        const threshold = Math.max(72, Math.round(window.innerHeight * 0.12));
        let current = sections[0];
        for (const section of sections) {
          if (section.target.getBoundingClientRect().top - threshold > 0) break;
          current = section;
        }
        setActive(current.id);
      };

      let ticking = false;
      window.addEventListener("scroll", () => {
        if (ticking) return;
        ticking = true;
        requestAnimationFrame(() => { updateActiveByScroll(); ticking = false; });
      }, { passive: true });

      for (const link of tocLinks) {
        link.addEventListener("click", (event) => {
          const href = link.getAttribute("href") || "";
          if (!href.startsWith("#")) return;
          event.preventDefault();
          const id = normalizeFragment(href);
          const target = id && document.getElementById(id);
          if (!target) return;
          target.scrollIntoView({ behavior: "smooth", block: "start" });
          setActive(id);
          history.replaceState(null, "", href);
        });
      }

      window.addEventListener("hashchange", () => {
        if (!scrollToFragment(window.location.hash)) updateActiveByScroll();
      });

      requestAnimationFrame(() => {
        if (!scrollToFragment(initialFragment) && !scrollToFragment(window.location.hash)) {
          updateActiveByScroll();
        }
      });

      // Images and fonts can move headings after the first frame; re-sync once loaded.
      window.addEventListener("load", () => {
        if (window.location.hash) scrollToFragment(window.location.hash);
        updateActiveByScroll();
      }, { once: true });
    })();
"""

DOCUMENT = Template("""\
<!doctype html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <meta name="viewport" content="width=device-width,initial-scale=1">
  <base href="$base_href">
  <style>
""" + DOCUMENT_CSS + """\
  </style>
</head>
<body>
  <div class="$layout_class">
    $toc_html
    <main class="wrap markdown-body">
      $front_matter_html
      $body_html
    </main>
  </div>
  <script>
""" + CLIENT_JS + """\
  </script>
</body>
</html>
""")

TOC = Template(
    '<aside class="toc-panel"><div class="toc-title">$title</div>'
    '<nav class="toc-links">$links</nav></aside>'
)

TOC_LINK = Template('<a class="toc-link level-$level" href="$href">$title</a>')

FRONT_MATTER = Template("""\
<details class="frontmatter-details">
        <summary class="frontmatter-summary">$summary</summary>
        <pre class="frontmatter-pre"><code class="frontmatter-code">$code</code></pre>
      </details>""")

ERROR_PAGE = Template("""\
<!doctype html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <meta name="viewport" content="width=device-width,initial-scale=1">
  <style>
    :root { color-scheme: light dark; --bg: #f6f7fb; --fg: #1f2732; --muted: #5b6572; }
    @media (prefers-color-scheme: dark) {
      :root { --bg: #0f141b; --fg: #dde5ef; --muted: #9aa8ba; }
    }
    html, body { height: 100%; margin: 0; }
    body {
      display: grid;
      place-items: center;
      background: var(--bg);
      color: var(--fg);
      font-family: "Avenir Next", "Charter", serif;
    }
    p { color: var(--muted); max-width: 720px; text-align: center; }
  </style>
</head>
<body>
  <main>
    <h1>Unable to open Markdown file</h1>
    <p>$message</p>
  </main>
</body>
</html>
""")

WELCOME_PAGE = Template("""\
<!doctype html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <meta name="viewport" content="width=device-width,initial-scale=1">
  <style>
""" + PALETTE_CSS + """\
    main {
      max-width: 960px;
      margin: 36px auto 42px;
      padding: 30px 34px;
      border: 1px solid var(--border);
      border-radius: 18px;
      background: var(--card);
      box-shadow: var(--shadow);
    }
    h1 { margin: 0 0 0.5em; font-family: "Avenir Next Demi Bold", "Gill Sans", sans-serif; }
    p { color: var(--muted); line-height: 1.65; font-size: 1.05rem; }
    kbd {
      padding: 2px 8px;
      border-radius: 7px;
      border: 1px solid var(--border);
      font-family: "Menlo", "SFMono-Regular", monospace;
      background: var(--code-bg);
    }
  </style>
</head>
<body>
  <main>
    <h1>$app_name</h1>
    <p>Markdown viewer with clean typography, a table of contents and highlighted front matter.</p>
    <p>Render a file with <kbd>$app_name render notes.md</kbd> and open the resulting page.</p>
  </main>
</body>
</html>
""")
