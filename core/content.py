"""Static content tables rendered by the home page.

Every table is an immutable tuple of frozen records; display order is tuple
order. Fragments wrapped in `mark_safe` carry inline `<code>` markup and are
written by hand, never derived from request input.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

from django.utils.safestring import mark_safe


@dataclass(frozen=True, slots=True)
class HighlightCard:
    """A decorative feature card.

    Attributes:
        icon: Registered icon name (see `core.icons`).
        title: Card heading; also used as the rendering key.
        description: Card body text.
    """

    icon: str
    title: str
    description: str


@dataclass(frozen=True, slots=True)
class LifecycleStage:
    """A named phase of an MQL4 program's runtime lifecycle."""

    name: str
    detail: str


@dataclass(frozen=True, slots=True)
class ExternalResource:
    """An outbound learning resource.

    Attributes:
        title: Display title.
        link: Absolute URL opened in a new browsing context.
        blurb: One-sentence summary.
    """

    title: str
    link: str
    blurb: str


@dataclass(frozen=True, slots=True)
class FaqItem:
    """A single accordion entry.

    Attributes:
        value: Unique identifier for the collapsible section.
        question: Trigger text.
        answer: Panel text revealed when the section is open.
    """

    value: str
    question: str
    answer: str


@dataclass(frozen=True, slots=True)
class HeroFeature:
    """A compact icon + caption tile shown in the hero banner."""

    icon: str
    title: str
    caption: str


@dataclass(frozen=True, slots=True)
class Construct:
    """A row of the language essentials reference table."""

    name: str
    description: str


@dataclass(frozen=True, slots=True)
class ToolingItem:
    """A tile in the tooling stack card."""

    title: str
    description: str


@dataclass(frozen=True, slots=True)
class FooterLink:
    """An outbound footer link with a leading icon."""

    label: str
    link: str
    icon: str


HIGHLIGHT_CARDS: Final[tuple[HighlightCard, ...]] = (
    HighlightCard(
        icon="sparkles",
        title="Purpose-Built DSL",
        description=(
            "MQL4 is a domain-specific language crafted for the MetaTrader 4 platform, enabling "
            "algorithmic trading with direct access to market data, order execution, and technical "
            "indicators."
        ),
    ),
    HighlightCard(
        icon="cog",
        title="Event-Driven Runtime",
        description=(
            "Expert Advisors respond to market ticks and chart events, while scripts and custom "
            "indicators share the same runtime. Understanding these entry points unlocks robust "
            "automation."
        ),
    ),
    HighlightCard(
        icon="line-chart",
        title="Strategy Friendly",
        description=(
            "Build and test strategies with built-in optimization, historical data access, and native "
            "indicator composition that minimizes boilerplate trading logic."
        ),
    ),
)

LIFECYCLE: Final[tuple[LifecycleStage, ...]] = (
    LifecycleStage(
        name="OnInit",
        detail=(
            "Runs once when an Expert Advisor, script, or indicator is loaded. Ideal for variable "
            "initialization, parameter validation, and resource allocation."
        ),
    ),
    LifecycleStage(
        name="OnTick",
        detail=(
            "Executed on every market tick. Primary loop for trading logic, signal detection, and "
            "risk management decisions."
        ),
    ),
    LifecycleStage(
        name="OnDeinit",
        detail=(
            "Triggered when the program is removed or the chart closes. Use it to release resources, "
            "close files, or deregister events."
        ),
    ),
)

RESOURCES: Final[tuple[ExternalResource, ...]] = (
    ExternalResource(
        title="MetaTrader 4 Documentation",
        link="https://docs.mql4.com/",
        blurb=(
            "Official language reference, standard library, and platform API docs maintained by "
            "MetaQuotes."
        ),
    ),
    ExternalResource(
        title="MQL4 Community Forum",
        link="https://www.mql5.com/en/forum",
        blurb="Active community covering strategy design, indicator sharing, and troubleshooting tips.",
    ),
    ExternalResource(
        title="Strategy Tester Walkthrough",
        link="https://www.mql5.com/en/articles/1443",
        blurb=(
            "Practical guide for validating Expert Advisors with historical simulations and "
            "optimization runs."
        ),
    ),
)

FAQ_ITEMS: Final[tuple[FaqItem, ...]] = (
    FaqItem(
        value="performance",
        question="How performant is MQL4 for high-frequency trading?",
        answer=(
            "MQL4 executes inside the MetaTrader terminal and is suitable for retail-level automation. "
            "For sub-millisecond latency or co-located execution, traders often graduate to native "
            "C++/Java gateways, but for most discretionary-to-automated strategies, MQL4 latency is "
            "acceptable."
        ),
    ),
    FaqItem(
        value="differences",
        question="What is the difference between MQL4 and MQL5?",
        answer=(
            "MQL5 introduces a more expressive language with object-oriented paradigms, multi-threaded "
            "strategy tester, and support for additional order types. MQL4 remains widely used due to "
            "broker support and the extensive ecosystem of indicators and Expert Advisors."
        ),
    ),
    FaqItem(
        value="learning",
        question="How long does it take to learn MQL4?",
        answer=(
            "If you already know C-style syntax (C/C++/C#), you can become productive within a week. "
            "The bigger learning curve is the MetaTrader event model and risk-adjusted strategy design."
        ),
    ),
)

HERO_FEATURES: Final[tuple[HeroFeature, ...]] = (
    HeroFeature(
        icon="brain-circuit",
        title="DSL for Traders",
        caption="C-inspired syntax. Trading-native primitives.",
    ),
    HeroFeature(
        icon="book-open-check",
        title="Rich Standard Library",
        caption="Indicators, risk helpers, math utilities.",
    ),
)

WORKFLOW_STEPS: Final[tuple[str, ...]] = (
    "Write Expert Advisors, indicators, and scripts in MetaEditor, leveraging templates and built-in "
    "snippets.",
    mark_safe(
        "Press <code>F7</code> to compile, then attach the resulting <code>.ex4</code> file to any "
        "chart in MetaTrader 4."
    ),
    "Iterate quickly by observing the terminal journal, enabling strategy tester traces, and "
    "profiling hotspots.",
)

CONSTRUCTS: Final[tuple[Construct, ...]] = (
    Construct(
        name="Expert Advisor",
        description=mark_safe(
            "Automates strategy execution and reacts to market events via <code>OnTick</code>."
        ),
    ),
    Construct(
        name="Indicator",
        description=mark_safe("Draws data on charts using <code>OnCalculate</code> for custom analytics."),
    ),
    Construct(
        name="Script",
        description="Runs once for utilities like batch order placement or chart management.",
    ),
)

BEST_PRACTICES: Final[tuple[str, ...]] = (
    "Modularize entry, exit, and risk logic for clarity and reusability.",
    "Use global variables or buffers to share state between indicator and EA components.",
    "Protect capital with equity stops, drawdown alerts, and trailing risk adjustments.",
)

TOOLING_STACK: Final[tuple[ToolingItem, ...]] = (
    ToolingItem(title="MetaEditor", description="Syntax-aware IDE with compiler, profiler, and debugger."),
    ToolingItem(
        title="Strategy Tester",
        description="Optimize inputs and replay historical data with ticks or control points.",
    ),
    ToolingItem(
        title="MQL4 Market",
        description="Discover plug-and-play indicators, scripts, and Expert Advisors.",
    ),
    ToolingItem(
        title="Journal + Logs",
        description="Inspect execution flow and diagnose trade lifecycle events.",
    ),
)

FOOTER_LINKS: Final[tuple[FooterLink, ...]] = (
    FooterLink(label="Articles", link="https://www.mql5.com/en/articles", icon="book-open-check"),
    FooterLink(label="Open-source repos", link="https://github.com/topics/mql4", icon="github"),
)

CODE_SAMPLE: Final[str] = """\
//+------------------------------------------------------------------+
//| Simple Moving Average Cross Expert Advisor                      |
//+------------------------------------------------------------------+
#property strict
input int FastMAPeriod = 20;
input int SlowMAPeriod = 50;
input double RiskPerTrade = 0.02;

double fastMA, slowMA;

int OnInit()
{
  Print("SMA expert initialized");
  return(INIT_SUCCEEDED);
}

void OnTick()
{
  fastMA = iMA(_Symbol, _Period, FastMAPeriod, 0, MODE_SMA, PRICE_CLOSE, 0);
  slowMA = iMA(_Symbol, _Period, SlowMAPeriod, 0, MODE_SMA, PRICE_CLOSE, 0);

  if (fastMA > slowMA && PositionsTotal() == 0)
  {
    double lotSize = NormalizeDouble(AccountBalance() * RiskPerTrade / 1000.0, 2);
    OrderSend(_Symbol, OP_BUY, lotSize, Ask, 5, 0, 0, "SMA Long", 0, 0, clrDodgerBlue);
  }
  else if (fastMA < slowMA)
  {
    for (int i = OrdersTotal() - 1; i >= 0; i--)
    {
      if (OrderSelect(i, SELECT_BY_POS, MODE_TRADES) && OrderType() == OP_BUY && OrderSymbol() == _Symbol)
      {
        OrderClose(OrderTicket(), OrderLots(), Bid, 5, clrFireBrick);
      }
    }
  }
}

void OnDeinit(const int reason)
{
  Print("SMA expert removed, reason: ", reason);
}
"""
