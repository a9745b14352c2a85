"""
Built-in themes.

Default decks are written in the same camelCase JSON shape users export
with ``htmldecks init``.
"""

STARTUP_PITCH = {
    "id": "startup-pitch",
    "name": "Startup Pitch",
    "description": "Dark gradient for investor pitches",
    "free": True,
    "defaults": {
        "name": "Startup Pitch",
        "companyName": "Acme Corp",
        "accentColor": "#7B6EF6",
        "slides": [
            {"type": "title", "title": "Acme Corp", "subtitle": "The Future of Smart Automation"},
            {
                "type": "bullets",
                "title": "The Problem",
                "content": (
                    "80% of businesses waste 20+ hours/week on manual tasks\n"
                    "Existing solutions are fragmented and expensive\n"
                    "Teams are burned out from repetitive work"
                ),
            },
            {
                "type": "bullets",
                "title": "Our Solution",
                "content": (
                    "AI-powered automation platform\n"
                    "One-click integrations with 200+ tools\n"
                    "Saves teams 15+ hours per week on average"
                ),
            },
            {
                "type": "stats",
                "title": "Traction",
                "metrics": [
                    {"number": "2,400", "label": "Active companies"},
                    {"number": "$1.2M", "label": "ARR, 3x year over year"},
                    {"number": "94%", "label": "Retention"},
                ],
            },
            {
                "type": "bar-chart",
                "title": "Revenue Growth",
                "series": [
                    {
                        "name": "ARR ($K)",
                        "data": [
                            {"label": "Q1", "value": 320},
                            {"label": "Q2", "value": 540},
                            {"label": "Q3", "value": 810},
                            {"label": "Q4", "value": 1200},
                        ],
                    }
                ],
            },
            {
                "type": "bullets",
                "title": "The Ask",
                "content": (
                    "Raising $5M Series A\n"
                    "Scale sales team from 4 → 20\n"
                    "Expand to European market in Q3"
                ),
            },
        ],
    },
    "style": {
        "name": "Startup Pitch",
        "background": "#0d0b1f",
        "surface": "rgba(123, 110, 246, 0.08)",
        "text": "#f4f3ff",
        "text_muted": "#a5a1c9",
        "border": "rgba(123, 110, 246, 0.25)",
        "heading_font": "'Space Grotesk', sans-serif",
        "body_font": "'Inter', sans-serif",
        "font_url": "https://fonts.googleapis.com/css2?family=Inter:wght@400;600&family=Space+Grotesk:wght@500;700&display=swap",
        "chart_palette": ["#7B6EF6", "#46D19A", "#F5A623", "#E14A8B", "#4A9FF5"],
        "chart_text": "#a5a1c9",
        "extra_css": "body { background: radial-gradient(ellipse at top, #2D1B69 0%, #0d0b1f 60%) fixed; }",
    },
}

SWISS_MODERN = {
    "id": "swiss-modern",
    "name": "Swiss Modern",
    "description": "Bauhaus grid for precise, minimal decks",
    "defaults": {
        "name": "Swiss Modern",
        "companyName": "Studio Grid",
        "accentColor": "#ff3300",
        "slides": [
            {"type": "title", "title": "Form Follows Function", "subtitle": "Annual design review", "badge": "2025"},
            {
                "type": "two-column",
                "title": "Principles",
                "leftColumn": "Grid before decoration\nType as structure\nWhite space is content",
                "rightColumn": "One accent color\nAsymmetric balance\nNothing without a reason",
            },
            {
                "type": "table",
                "title": "Project Overview",
                "tableData": [
                    ["Project", "Client", "Status"],
                    ["Wayfinding", "City Museum", "Shipped"],
                    ["Identity", "Nordbank", "In review"],
                    ["Editorial", "Form Magazine", "Planning"],
                ],
            },
            {
                "type": "line-chart",
                "title": "Studio Growth",
                "series": [
                    {"name": "Clients", "data": [{"x": "2021", "y": 8}, {"x": "2022", "y": 14}, {"x": "2023", "y": 22}, {"x": "2024", "y": 31}]},
                    {"name": "Staff", "data": [{"x": "2021", "y": 4}, {"x": "2022", "y": 6}, {"x": "2023", "y": 9}, {"x": "2024", "y": 12}]},
                ],
            },
            {
                "type": "pie-chart",
                "title": "Revenue by Discipline",
                "segments": [
                    {"label": "Identity", "value": 45},
                    {"label": "Editorial", "value": 30},
                    {"label": "Digital", "value": 25},
                ],
            },
            {
                "type": "quote",
                "title": "Client Voice",
                "quote": "They removed everything we did not need and the rest finally made sense.",
                "attribution": "Head of Brand, Nordbank",
            },
            {
                "type": "image-text",
                "title": "The Studio",
                "imageUrl": "https://placehold.co/600x400",
                "description": "Twelve designers in one room.\nOne grid, shared by every project.",
                "layout": "image-left",
            },
        ],
    },
    "style": {
        "name": "Swiss Modern",
        "background": "#ffffff",
        "surface": "#f4f4f4",
        "text": "#000000",
        "text_muted": "#333333",
        "border": "rgba(0, 0, 0, 0.1)",
        "heading_font": "'Archivo', sans-serif",
        "body_font": "'Nunito', sans-serif",
        "font_url": "https://fonts.googleapis.com/css2?family=Archivo:wght@400;700;800;900&family=Nunito:wght@400;600&display=swap",
        "chart_palette": ["#ff3300", "#000000", "#333333", "#0066ff", "#009900"],
        "chart_text": "#333333",
        "corner_radius": "0",
        "extra_css": "h1, h2 { text-transform: uppercase; letter-spacing: -0.02em; }",
    },
}

TOKYO_NEON = {
    "id": "tokyo-neon",
    "name": "Tokyo Neon",
    "description": "Neon on black for launches and keynotes",
    "defaults": {
        "name": "Tokyo Neon",
        "companyName": "Neon Labs",
        "accentColor": "#ff2d95",
        "slides": [
            {"type": "title", "title": "Launch Night", "subtitle": "Introducing Pulse 2.0", "badge": "Live"},
            {
                "type": "bullets",
                "title": "What's New",
                "content": "Realtime sync across every device\nOffline mode that just works\nA redesigned command palette",
            },
            {
                "type": "stats",
                "title": "Beta in Numbers",
                "metrics": [
                    {"number": "48K", "label": "Beta users"},
                    {"number": "3.1x", "label": "Faster sync"},
                    {"number": "99.98%", "label": "Uptime"},
                ],
            },
            {
                "type": "bar-chart",
                "title": "Performance",
                "series": [
                    {"name": "v1", "data": [{"label": "Sync", "value": 420}, {"label": "Search", "value": 180}, {"label": "Boot", "value": 950}]},
                    {"name": "v2", "data": [{"label": "Sync", "value": 130}, {"label": "Search", "value": 60}, {"label": "Boot", "value": 310}]},
                ],
            },
            {
                "type": "bullets",
                "title": "Available Today",
                "content": "Download at neonlabs.dev\nFree for teams up to 5",
            },
        ],
    },
    "style": {
        "name": "Tokyo Neon",
        "background": "#07070d",
        "surface": "rgba(255, 45, 149, 0.06)",
        "text": "#f0f0ff",
        "text_muted": "#8b8ba7",
        "border": "rgba(0, 212, 255, 0.2)",
        "heading_font": "'Orbitron', sans-serif",
        "body_font": "'Inter', sans-serif",
        "font_url": "https://fonts.googleapis.com/css2?family=Inter:wght@400;600&family=Orbitron:wght@500;800&display=swap",
        "chart_palette": ["#ff2d95", "#00d4ff", "#fbbf24", "#a855f7", "#34d399"],
        "chart_text": "#8b8ba7",
        "extra_css": "h1, h2 { text-shadow: 0 0 24px var(--accent); }",
    },
}

BUILTIN_THEMES = [STARTUP_PITCH, SWISS_MODERN, TOKYO_NEON]
