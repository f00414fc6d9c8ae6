"""Streamlit dashboard for the household ledger."""

from collections.abc import Sequence
from datetime import date

import streamlit as st
import altair as alt

from src.application.use_cases.get_dashboard_overview import (
    DashboardOverview,
)
from src.application.use_cases.get_debt_overview import DebtOverview
from src.application.use_cases.get_period_summary import PeriodSummary
from src.application.use_cases.get_upcoming_reminders import Reminder
from src.adapters.interface.streamlit.charts import (
    bucket_chart_data,
    format_currency,
    format_metric_delta,
    goal_rows,
    prepare_donut_chart_data,
    reminder_rows,
    transaction_rows,
)
from src.domain.models.finance import Granularity, VisibilityScope
from src.domain.models.ledger import Transaction
from src.infrastructure.container import (
    build_dashboard_use_case,
    build_debt_overview_use_case,
    build_period_summary_use_case,
    build_clock,
    build_reminders_use_case,
    build_search_use_case,
    build_settings,
)

_SCOPE_LABELS = {"Family": VisibilityScope.FAMILY, "Me": VisibilityScope.SELF}


def _fetch_dashboard(
    scope: VisibilityScope,
    user_id: str | None,
) -> DashboardOverview:
    """Fetch the home view figures."""
    use_case = build_dashboard_use_case()
    return use_case.execute(scope=scope, current_user_id=user_id)


@st.cache_data(show_spinner=False, ttl=60)
def _load_dashboard(
    scope: VisibilityScope,
    user_id: str | None,
) -> DashboardOverview:
    """Cached wrapper around _fetch_dashboard."""
    return _fetch_dashboard(scope, user_id)


def _fetch_period_summary(
    anchor: date,
    granularity: Granularity,
    scope: VisibilityScope,
    user_id: str | None,
) -> PeriodSummary:
    """Fetch the statistics of the anchor's period."""
    use_case = build_period_summary_use_case()
    return use_case.execute(
        anchor,
        granularity=granularity,
        scope=scope,
        current_user_id=user_id,
    )


@st.cache_data(show_spinner=False, ttl=60)
def _load_period_summary(
    anchor: date,
    granularity: Granularity,
    scope: VisibilityScope,
    user_id: str | None,
) -> PeriodSummary:
    """Cached wrapper around _fetch_period_summary."""
    return _fetch_period_summary(anchor, granularity, scope, user_id)


def _fetch_reminders() -> Sequence[Reminder]:
    """Fetch reminders due as of now."""
    return build_reminders_use_case().execute()


def _fetch_debt_overview(
    scope: VisibilityScope,
    user_id: str | None,
) -> DebtOverview:
    """Fetch the debt management figures."""
    use_case = build_debt_overview_use_case()
    return use_case.execute(scope=scope, current_user_id=user_id)


def _fetch_transactions(
    scope: VisibilityScope,
    user_id: str | None,
    query: str | None,
) -> Sequence[Transaction]:
    """Fetch visible transactions matching the search box."""
    use_case = build_search_use_case()
    return use_case.execute(
        scope=scope,
        current_user_id=user_id,
        query=query,
    )


def _render_trend_chart(summary: PeriodSummary) -> None:
    """Render income, expense and debt per bucket as grouped bars."""
    data = bucket_chart_data(summary.buckets)
    chart = alt.Chart(alt.Data(values=data)).mark_bar().encode(
        x=alt.X("index:O", title=None, axis=alt.Axis(labelAngle=0)),
        xOffset="series:N",
        y=alt.Y("amount:Q", title=None),
        color=alt.Color(
            "series:N",
            scale=alt.Scale(
                domain=["Income", "Expense", "Debt"],
                range=["#2e7d32", "#e76f51", "#457b9d"],
            ),
            legend=alt.Legend(orient="bottom", title=None),
        ),
        tooltip=[
            alt.Tooltip("label:N"),
            alt.Tooltip("series:N"),
            alt.Tooltip("amount:Q", format=",.2f"),
            alt.Tooltip("entries:Q", title="Entries"),
        ],
    )
    st.subheader("Trend")
    st.altair_chart(chart, width='stretch')


def _render_category_chart(
    summary: PeriodSummary,
    max_categories: int = 6,
    chart_size: int = 320,
) -> None:
    """Render a donut chart of expense by category."""
    if not summary.categories:
        st.info("No expenses in this period.")
        return
    data, _ = prepare_donut_chart_data(
        summary.categories,
        max_categories=max_categories,
    )
    chart = alt.Chart(alt.Data(values=data)).mark_arc(
        innerRadius=chart_size * 0.4,
        cornerRadius=8,
        padAngle=0.02,
    ).encode(
        theta=alt.Theta("amount:Q"),
        color=alt.Color(
            "category:N",
            legend=alt.Legend(orient="bottom", title=None, columns=2),
        ),
        order=alt.Order("amount:Q", sort="descending"),
        tooltip=[
            alt.Tooltip("category:N"),
            alt.Tooltip("amount_label:N"),
            alt.Tooltip("share_label:N"),
        ],
    ).properties(
        width=chart_size,
        height=chart_size,
    )
    st.subheader("Expense by category")
    st.altair_chart(chart, width='stretch')


def _render_home(scope: VisibilityScope, user_id: str | None) -> None:
    """Render cash, budget, reminders and goals."""
    overview = _load_dashboard(scope, user_id)
    cash_col, flexible_col, streak_col = st.columns(3)
    cash_col.metric("Cash balance", format_currency(overview.cash_balance))
    flexible_col.metric(
        "Flexible cash",
        format_currency(overview.flexible_cash),
    )
    streak_col.metric("Streak", f"{overview.streak_days} days")

    budget = overview.budget
    st.subheader("Monthly budget")
    st.progress(float(budget.health_percent) / 100)
    st.caption(
        f"Spent {format_currency(budget.spent)} of "
        f"{format_currency(budget.budget)}, "
        f"{format_currency(budget.remaining)} left"
    )

    income_col, expense_col, card_col = st.columns(3)
    income_col.metric(
        "Income this month",
        format_currency(overview.month_income),
    )
    expense_col.metric(
        "Expense this month",
        format_currency(overview.month_expense),
    )
    card_col.metric(
        "Credit card debt",
        format_currency(overview.credit_card_debt),
    )

    reminders = _fetch_reminders()
    st.subheader("Reminders")
    if reminders:
        st.dataframe(reminder_rows(reminders), hide_index=True)
    else:
        st.caption("Nothing due soon.")

    st.subheader("Savings goals")
    if overview.goals:
        st.dataframe(
            goal_rows(overview.goals),
            hide_index=True,
            column_config={
                "Progress": st.column_config.ProgressColumn(
                    "Progress",
                    min_value=0.0,
                    max_value=1.0,
                ),
            },
        )
    else:
        st.caption("No savings goals yet.")

    baby_spend = overview.baby_spend
    if baby_spend.total > 0:
        st.subheader("Baby spending")
        for baby in baby_spend.per_baby:
            st.write(f"{baby.name}: {format_currency(baby.amount)}")
        st.caption(f"Household total {format_currency(baby_spend.total)}")


def _render_statistics(
    scope: VisibilityScope,
    user_id: str | None,
    today: date,
) -> None:
    """Render period totals, comparison and charts."""
    granularity = Granularity(
        st.sidebar.selectbox("Granularity", ["MONTH", "YEAR"])
    )
    anchor = st.sidebar.date_input("Period", value=today)
    summary = _load_period_summary(anchor, granularity, scope, user_id)

    income_col, expense_col, debt_col, savings_col = st.columns(4)
    income_col.metric(
        "Income",
        format_currency(summary.current.income),
        format_metric_delta(summary.income_delta),
    )
    expense_col.metric(
        "Expense",
        format_currency(summary.current.expense),
        format_metric_delta(summary.expense_delta),
        delta_color="inverse",
    )
    debt_col.metric(
        "New debt",
        format_currency(summary.current.debt_issued),
        format_metric_delta(summary.debt_delta),
        delta_color="inverse",
    )
    savings_col.metric(
        "Net savings",
        format_currency(summary.net_savings),
        f"{summary.savings_rate:.1f}% of income",
        delta_color="off",
    )

    chart_left, chart_right = st.columns(2)
    with chart_left:
        _render_trend_chart(summary)
    with chart_right:
        _render_category_chart(summary)


def _render_debts(scope: VisibilityScope, user_id: str | None) -> None:
    """Render card, loan and group debt."""
    overview = _fetch_debt_overview(scope, user_id)
    st.metric("Total debt", format_currency(overview.headline_total))
    cards_col, loans_col = st.columns(2)
    with cards_col:
        st.subheader("Credit cards")
        for card in overview.cards:
            st.write(f"{card.name}: {format_currency(card.outstanding)}")
    with loans_col:
        st.subheader("Loans")
        for loan in overview.loans:
            st.write(f"{loan.name}: {format_currency(loan.outstanding)}")
    st.subheader("By group")
    st.dataframe(
        [
            {"Group": group.group, "Net debt": format_currency(group.amount)}
            for group in overview.groups
        ],
        hide_index=True,
    )


def _render_ledger(scope: VisibilityScope, user_id: str | None) -> None:
    """Render the searchable transaction list."""
    query = st.text_input("Search", placeholder="Note, category or amount")
    transactions = _fetch_transactions(scope, user_id, query or None)
    st.caption(f"{len(transactions)} entries")
    st.dataframe(transaction_rows(transactions), hide_index=True)


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Household Ledger", layout="wide")
    st.title("Household Ledger")

    settings = build_settings()
    page = st.sidebar.selectbox(
        "Page",
        ["Home", "Statistics", "Debts", "Ledger"],
    )
    default_label = "Me" if settings.scope == VisibilityScope.SELF else "Family"
    scope_label = st.sidebar.radio(
        "Scope",
        list(_SCOPE_LABELS),
        index=list(_SCOPE_LABELS).index(default_label),
    )
    scope = _SCOPE_LABELS[scope_label]
    user_id = settings.current_user_id
    today = build_clock()().date()

    if page == "Home":
        _render_home(scope, user_id)
    elif page == "Statistics":
        _render_statistics(scope, user_id, today)
    elif page == "Debts":
        _render_debts(scope, user_id)
    else:
        _render_ledger(scope, user_id)


if __name__ == "__main__":  # pragma: no cover
    main()
