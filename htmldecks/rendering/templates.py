"""
Jinja2 templates for slides and the standalone deck document.
"""

SLIDE_TEMPLATE = """
{%- macro field(name) -%}
{%- if editable %} data-field="{{ name }}" contenteditable="true" spellcheck="true"{% endif -%}
{%- endmacro -%}

{%- macro bullet_list(items) -%}
<ul class="slide__bullets">
  {%- for b in items %}
  <li style="--delay: {{ loop.index0 * 0.1 }}s"><span class="bullet-marker"></span><span class="bullet-text"{{ field(b.field) }}>{{ b.text }}</span></li>
  {%- endfor %}
</ul>
{%- endmacro -%}

<section class="slide slide--{{ s.layout }}{% if s.layout == 'bullets' and s.type != 'bullets' %} slide--fallback{% endif %}" data-index="{{ s.index }}" data-type="{{ s.type }}">
  <div class="slide__content">
  {%- if s.layout == 'title' %}
    <div class="slide__tag">{{ company }}</div>
    <h1{{ field('title') }}>{{ s.title }}</h1>
    {%- if s.subtitle is not none %}
    <p class="slide__subtitle"{{ field('subtitle') }}>{{ s.subtitle }}</p>
    {%- endif %}
    {%- if s.badge is not none %}
    <div class="slide__badge"{{ field('badge') }}>{{ s.badge }}</div>
    {%- endif %}
  {%- else %}
    <div class="slide__number">{{ '%02d' % s.number }}</div>
    <h2{{ field('title') }}>{{ s.title }}</h2>
    {%- if s.layout == 'bullets' %}
    {{ bullet_list(s.bullets) }}
    {%- elif s.layout == 'two-column' %}
    <div class="slide__two-column">
      {%- for col in s.columns %}
      <div class="slide__column" data-column="{{ col.field }}">
        {{ bullet_list(col.bullets) }}
      </div>
      {%- endfor %}
    </div>
    {%- elif s.layout == 'stats' %}
    <div class="slide__stats">
      {%- for m in s.metrics %}
      <div class="slide__stat" style="--delay: {{ loop.index0 * 0.1 }}s">
        <div class="slide__stat-number"{{ field(m.number_field) }}>{{ m.number }}</div>
        <div class="slide__stat-label"{{ field(m.label_field) }}>{{ m.label }}</div>
      </div>
      {%- endfor %}
    </div>
    {%- elif s.layout == 'quote' %}
    <figure class="slide__quote-block">
      <blockquote class="slide__quote"{{ field('quote') }}>{{ s.quote }}</blockquote>
      {%- if s.attribution is not none %}
      <figcaption class="slide__attribution"{{ field('attribution') }}>{{ s.attribution }}</figcaption>
      {%- endif %}
    </figure>
    {%- elif s.layout == 'table' %}
    <div class="table-container">
      <table class="slide__table">
        {%- if s.header %}
        <thead><tr>
          {%- for cell in s.header %}<th{{ field(cell.field) }}>{{ cell.text }}</th>{% endfor -%}
        </tr></thead>
        {%- endif %}
        <tbody>
          {%- for row in s.rows %}
          <tr>{% for cell in row %}<td{{ field(cell.field) }}>{{ cell.text }}</td>{% endfor %}</tr>
          {%- endfor %}
        </tbody>
      </table>
    </div>
    {%- elif s.layout == 'chart' %}
    <div class="slide__chart">
      {{ s.chart }}
    </div>
    {%- elif s.layout == 'image-text' %}
    <div class="slide__image-text slide__image-text--{{ s.image_side }}">
      <div class="slide__image"><img src="{{ s.image_url }}" alt=""></div>
      {%- if editable %}
      <div class="slide__text"{{ field('description') }}>{{ s.description }}</div>
      {%- else %}
      <div class="slide__text">
        {%- for p in s.paragraphs %}
        <p>{{ p }}</p>
        {%- endfor %}
      </div>
      {%- endif %}
    </div>
    {%- endif %}
  {%- endif %}
  </div>
</section>
"""

THUMBNAIL_TEMPLATE = """
<div class="thumb{% if active %} thumb--active{% endif %}" data-index="{{ s.index }}" data-type="{{ s.type }}">
  <span class="thumb__number">{{ s.number }}</span>
  <span class="thumb__title">{{ s.title }}</span>
  <span class="thumb__kind">{{ s.type }}</span>
</div>
"""

DOCUMENT_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>{{ company }} — {{ style.name }}</title>
  {%- if style.font_url %}
  <link rel="preconnect" href="https://fonts.googleapis.com">
  <link href="{{ style.font_url }}" rel="stylesheet">
  {%- endif %}
  <style>
    *, *::before, *::after { box-sizing: border-box; margin: 0; padding: 0; }

    :root {
      --accent: {{ accent }};
      --bg: {{ style.background|safe }};
      --surface: {{ style.surface|safe }};
      --text: {{ style.text|safe }};
      --text-muted: {{ style.text_muted|safe }};
      --border: {{ style.border|safe }};
      --radius: {{ style.corner_radius|safe }};
      --font-heading: {{ style.heading_font|safe }};
      --font-body: {{ style.body_font|safe }};
    }

    @media (prefers-reduced-motion: reduce) {
      *, *::before, *::after {
        animation-duration: 0.01ms !important;
        animation-iteration-count: 1 !important;
        transition-duration: 0.01ms !important;
      }
    }

    html { scroll-snap-type: y mandatory; scroll-behavior: smooth; overflow-x: hidden; }
    body { background: var(--bg); color: var(--text); font-family: var(--font-body); line-height: 1.6; }

    .slide {
      min-height: 100vh;
      scroll-snap-align: start;
      display: flex;
      align-items: center;
      justify-content: center;
      padding: 80px 10vw;
      position: relative;
    }
    .slide__content { width: 100%; max-width: 1100px; animation: slideIn 0.6s ease forwards; }
    .slide__number { font-family: var(--font-heading); color: var(--accent); font-weight: 700; margin-bottom: 12px; }
    .slide__tag { color: var(--accent); text-transform: uppercase; letter-spacing: 0.15em; font-size: 0.85rem; margin-bottom: 24px; }
    h1 { font-family: var(--font-heading); font-size: clamp(2.5rem, 6vw, 5rem); line-height: 1.1; }
    h2 { font-family: var(--font-heading); font-size: clamp(1.8rem, 4vw, 3rem); line-height: 1.2; margin-bottom: 40px; }
    .slide__subtitle { color: var(--text-muted); font-size: 1.4rem; margin-top: 24px; }
    .slide__badge { display: inline-block; margin-top: 32px; padding: 6px 16px; border: 1px solid var(--accent); color: var(--accent); border-radius: 999px; font-size: 0.85rem; }

    .slide__bullets { list-style: none; display: grid; gap: 20px; }
    .slide__bullets li { display: flex; gap: 16px; align-items: baseline; font-size: 1.3rem; animation: slideIn 0.5s ease var(--delay, 0s) both; }
    .bullet-marker { flex: none; width: 10px; height: 10px; border-radius: 50%; background: var(--accent); }
    .slide__two-column { display: grid; grid-template-columns: 1fr 1fr; gap: 48px; }

    .slide__stats { display: grid; grid-template-columns: repeat(auto-fit, minmax(200px, 1fr)); gap: 32px; }
    .slide__stat { padding: 32px; background: var(--surface); border: 1px solid var(--border); border-radius: var(--radius); animation: slideIn 0.5s ease var(--delay, 0s) both; }
    .slide__stat-number { font-family: var(--font-heading); font-size: 3rem; font-weight: 800; color: var(--accent); }
    .slide__stat-label { color: var(--text-muted); }

    .slide__quote { font-family: var(--font-heading); font-size: clamp(1.6rem, 3vw, 2.4rem); line-height: 1.4; border-left: 4px solid var(--accent); padding-left: 32px; }
    .slide__attribution { margin-top: 24px; padding-left: 36px; color: var(--text-muted); font-style: normal; }

    .table-container { overflow-x: auto; border: 1px solid var(--border); border-radius: var(--radius); }
    .slide__table { width: 100%; border-collapse: collapse; }
    .slide__table th, .slide__table td { padding: 14px 20px; text-align: left; border-bottom: 1px solid var(--border); }
    .slide__table th { color: var(--accent); font-family: var(--font-heading); background: var(--surface); }

    .slide__chart { background: var(--surface); border: 1px solid var(--border); border-radius: var(--radius); padding: 24px; }
    .slide__chart svg { max-width: 100%; height: auto; display: block; margin: 0 auto; }
    .chart__axis { stroke: var(--text-muted); }
    .chart__label, .chart__legend { fill: {{ style.chart_text|safe }}; font-family: var(--font-body); font-size: 12px; }
    .chart-placeholder { color: var(--text-muted); text-align: center; padding: 48px; }

    .slide__image-text { display: grid; grid-template-columns: 1fr 1fr; gap: 48px; align-items: center; }
    .slide__image-text--right .slide__image { order: 2; }
    .slide__image img { width: 100%; border-radius: var(--radius); display: block; }
    .slide__text p + p { margin-top: 16px; }

    .progress { position: fixed; top: 0; left: 0; height: 3px; width: 0; background: var(--accent); z-index: 100; transition: width 0.3s ease; }
    .nav-dots { position: fixed; right: 24px; top: 50%; transform: translateY(-50%); display: flex; flex-direction: column; gap: 12px; z-index: 100; }
    .nav-dot { width: 10px; height: 10px; border-radius: 50%; border: none; background: var(--border); cursor: pointer; padding: 0; }
    .nav-dot--active { background: var(--accent); transform: scale(1.3); }
    .slide-counter { position: fixed; bottom: 24px; right: 24px; color: var(--text-muted); font-size: 0.85rem; z-index: 100; }

    @keyframes slideIn { from { opacity: 0; transform: translateY(20px); } to { opacity: 1; transform: none; } }

    @media print {
      html { scroll-snap-type: none; scroll-behavior: auto; }
      .slide { min-height: auto; scroll-snap-align: none; page-break-after: always; break-inside: avoid; padding: 40px; }
      .slide__content, .slide__bullets li, .slide__stat { animation: none !important; opacity: 1; transform: none; }
      .progress, .nav-dots, .slide-counter { display: none; }
    }

    @media (max-width: 768px) {
      .slide { padding: 48px 24px; }
      .slide__two-column, .slide__image-text { grid-template-columns: 1fr; gap: 24px; }
      .slide__image-text--right .slide__image { order: 0; }
      .nav-dots { right: 12px; gap: 8px; }
    }
    {{ style.extra_css|safe }}
  </style>
</head>
<body>
  <div class="progress" id="progress" style="width: {{ '%.4f' % (100 / total) if total else 0 }}%"></div>

  <nav class="nav-dots" id="navDots">
    {%- for i in range(total) %}
    <button class="nav-dot{% if i == 0 %} nav-dot--active{% endif %}" data-index="{{ i }}" aria-label="Go to slide {{ i + 1 }}"></button>
    {%- endfor %}
  </nav>

  <div class="slide-counter" id="slideCounter">{{ 1 if total else 0 }} / {{ total }}</div>

  {%- for html in slides %}
  {{ html }}
  {%- endfor %}

  <script>
    (function () {
      var slides = document.querySelectorAll('.slide');
      var dots = document.querySelectorAll('.nav-dot');
      var progress = document.getElementById('progress');
      var counter = document.getElementById('slideCounter');
      var total = slides.length;
      var current = 0;

      function goTo(index) {
        if (index < 0 || index >= total) return;
        slides[index].scrollIntoView({ behavior: 'smooth' });
      }

      function updateUI(index) {
        current = index;
        progress.style.width = ((index + 1) / total * 100) + '%';
        counter.textContent = (index + 1) + ' / ' + total;
        dots.forEach(function (d, i) { d.classList.toggle('nav-dot--active', i === index); });
      }

      var observer = new IntersectionObserver(function (entries) {
        entries.forEach(function (e) {
          if (e.isIntersecting) updateUI(parseInt(e.target.dataset.index, 10));
        });
      }, { threshold: 0.5 });
      slides.forEach(function (s) { observer.observe(s); });

      dots.forEach(function (dot) {
        dot.addEventListener('click', function () { goTo(parseInt(dot.dataset.index, 10)); });
      });

      document.addEventListener('keydown', function (e) {
        if (['ArrowDown', 'ArrowRight', 'PageDown', ' '].indexOf(e.key) !== -1) {
          e.preventDefault();
          goTo(current + 1);
        } else if (['ArrowUp', 'ArrowLeft', 'PageUp'].indexOf(e.key) !== -1) {
          e.preventDefault();
          goTo(current - 1);
        }
      });

      var touchY = 0;
      document.addEventListener('touchstart', function (e) { touchY = e.touches[0].clientY; });
      document.addEventListener('touchend', function (e) {
        var delta = touchY - e.changedTouches[0].clientY;
        if (Math.abs(delta) > 50) goTo(delta > 0 ? current + 1 : current - 1);
      });
    })();
  </script>
  {%- if watermark %}
  <div class="htmldecks-watermark" style="position: fixed !important; bottom: 16px !important; left: 16px !important; z-index: 2147483647 !important; display: block !important; opacity: 1 !important; visibility: visible !important; font-size: 11px; font-family: var(--font-body); color: var(--text-muted); pointer-events: none;">
    <a href="https://htmldecks.com" target="_blank" rel="noopener" style="color: inherit; text-decoration: none; pointer-events: auto;">Made with HTML Decks</a>
  </div>
  {%- endif %}
</body>
</html>
"""
