"""inciscope color theme and constants."""

# Brand colors
INCI_EMERALD = "#5fd7af"  # Primary brand color
INCI_MINT = "#87ffd7"  # Lighter accent, highlights scores
INCI_PINE = "#008787"  # Darker accent for borders
INCI_SLATE = "#87afd7"  # Complementary accent for secondary data

# Background colors
BG_DARK = "#1c1c1c"  # Main background
BG_SURFACE = "#262626"  # Panels and the result list

# Verdict and status colors
SUCCESS = "#87d787"
WARNING = "#ffaf5f"
ERROR = "#ff8787"

TEXT_MUTED = "#808080"

# Textual CSS variables, prepended to the app stylesheet
CSS_VARS = f"""
$inci-emerald: {INCI_EMERALD};
$inci-mint: {INCI_MINT};
$inci-pine: {INCI_PINE};
$inci-slate: {INCI_SLATE};

$bg-dark: {BG_DARK};
$bg-surface: {BG_SURFACE};

$text-muted: {TEXT_MUTED};
"""
