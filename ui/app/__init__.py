"""ui.app

Site compositions for this repository: header/footer shell and the pages.

These are not general-purpose components; they implement the pages served by
`app.main`.
"""

from ui.app.navbar import Header, GovBanner
from ui.app.layout import Footer, PageShell, SITE_NAME
from ui.app.frontpage import HomePage
from ui.app.loan_simulator import (
    LoanSimulatorPage,
    PlanCard,
    SimulatorForm,
    SimulatorResults,
    SIMULATOR_PATH,
    EXPORT_PATH,
)

__all__ = [
    # Layout
    "Header",
    "GovBanner",
    "Footer",
    "PageShell",
    "SITE_NAME",
    # Pages
    "HomePage",
    "LoanSimulatorPage",
    "PlanCard",
    "SimulatorForm",
    "SimulatorResults",
    "SIMULATOR_PATH",
    "EXPORT_PATH",
]
