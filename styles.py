"""
styles.py

Application stylesheets - Tailwind (light) and Foundation (dark) themes.
"""

TAILWIND_STYLE = """
/* === Tailwind CSS-inspired Theme === */
/* Primary: #6366f1 (Indigo-500), Slate grays */

QMainWindow {
    background-color: #f8fafc;
}

QWidget {
    background-color: #f8fafc;
    color: #1e293b;
    font-family: "Inter", "Segoe UI", sans-serif;
    font-size: 13px;
}

QMenuBar {
    background-color: #ffffff;
    color: #475569;
    border-bottom: 1px solid #e2e8f0;
}

QMenuBar::item:selected, QMenu::item:selected {
    background-color: #f1f5f9;
    color: #6366f1;
}

QToolBar {
    background-color: #ffffff;
    border: none;
    border-bottom: 1px solid #e2e8f0;
    padding: 4px 6px;
    spacing: 6px;
}

QPushButton {
    background-color: #6366f1;
    color: #ffffff;
    border: none;
    border-radius: 6px;
    padding: 6px 14px;
}

QPushButton:hover {
    background-color: #4f46e5;
}

QPushButton:pressed {
    background-color: #4338ca;
}

QStatusBar {
    background-color: #ffffff;
    color: #64748b;
    border-top: 1px solid #e2e8f0;
}
"""

FOUNDATION_STYLE = """
/* === Base Colors === */
QMainWindow {
    background-color: #1e1e1e;
}

QWidget {
    background-color: #252526;
    color: #cccccc;
    font-family: "Segoe UI", "SF Pro Display", sans-serif;
    font-size: 13px;
}

QMenuBar {
    background-color: #333333;
    color: #cccccc;
    border-bottom: 1px solid #404040;
}

QMenuBar::item:selected, QMenu::item:selected {
    background-color: #094771;
}

QToolBar {
    background-color: #333333;
    border: none;
    border-bottom: 1px solid #404040;
    padding: 4px 6px;
    spacing: 6px;
}

QPushButton {
    background-color: #0e639c;
    color: #ffffff;
    border: 1px solid #1177bb;
    border-radius: 3px;
    padding: 6px 14px;
}

QPushButton:hover {
    background-color: #1177bb;
}

QStatusBar {
    background-color: #007acc;
    color: #ffffff;
}
"""

# Style registry for easy access
STYLES = {
    "Tailwind": TAILWIND_STYLE,
    "Foundation (Dark)": FOUNDATION_STYLE,
}

DEFAULT_STYLE = "Tailwind"

# Canvas clear color per theme. The curve palette is tuned for light
# backgrounds, so the dark theme keeps a light canvas.
CANVAS_BACKGROUND_COLORS = {
    "Tailwind": "#FFFFFF",
    "Foundation (Dark)": "#F5F5F5",
}
