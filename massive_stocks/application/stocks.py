from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from massive_stocks.application.container import get_client
from massive_stocks.core.errors import InvalidQueryParameterError
from massive_stocks.domain.interfaces import JsonHttpClient
from massive_stocks.domain.uri import build_uri

# Path segments are interpolated as given; only query values are encoded.


def _get(uri: str, client: JsonHttpClient | None) -> Any:
    return (client if client is not None else get_client()).get_json(uri)


def previous_close(
    ticker: str,
    *,
    adjusted: bool | None = None,
    client: JsonHttpClient | None = None,
) -> Any:
    """Previous trading day's OHLC bar for ``ticker``."""
    uri = build_uri(f"/v2/aggs/ticker/{ticker}/prev", {"adjusted": adjusted})
    return _get(uri, client)


def aggregates(
    ticker: str,
    multiplier: int,
    timespan: str,
    from_date: str,
    to_date: str,
    *,
    adjusted: bool | None = None,
    sort: str | None = None,
    limit: int | None = None,
    client: JsonHttpClient | None = None,
) -> Any:
    """Aggregate bars over ``[from_date, to_date]``.

    ``timespan`` is one of second, minute, hour, day, week, month, quarter or
    year; the window bounds are ``YYYY-MM-DD`` dates or millisecond timestamps.
    """
    uri = build_uri(
        f"/v2/aggs/ticker/{ticker}/range/{multiplier}/{timespan}/{from_date}/{to_date}",
        {
            "adjusted": adjusted,
            "sort": sort,
            "limit": limit,
        },
    )
    return _get(uri, client)


def last_quote(ticker: str, *, client: JsonHttpClient | None = None) -> Any:
    """Most recent NBBO quote."""
    return _get(f"/v2/last/nbbo/{ticker}", client)


def last_trade(ticker: str, *, client: JsonHttpClient | None = None) -> Any:
    return _get(f"/v2/last/trade/{ticker}", client)


def _indicator(
    name: str,
    ticker: str,
    *,
    timestamp: str | int | None,
    timespan: str | None,
    adjusted: bool | None,
    window: int | None,
    series_type: str | None,
    expand_underlying: bool | None,
    order: str | None,
    limit: int | None,
    client: JsonHttpClient | None,
) -> Any:
    uri = build_uri(
        f"/v1/indicators/{name}/{ticker}",
        {
            "timestamp": timestamp,
            "timespan": timespan,
            "adjusted": adjusted,
            "window": window,
            "series_type": series_type,
            "expand_underlying": expand_underlying,
            "order": order,
            "limit": limit,
        },
    )
    return _get(uri, client)


def sma(
    ticker: str,
    *,
    timestamp: str | int | None = None,
    timespan: str | None = None,
    adjusted: bool | None = None,
    window: int | None = None,
    series_type: str | None = None,
    expand_underlying: bool | None = None,
    order: str | None = None,
    limit: int | None = None,
    client: JsonHttpClient | None = None,
) -> Any:
    """Simple moving average."""
    return _indicator(
        "sma",
        ticker,
        timestamp=timestamp,
        timespan=timespan,
        adjusted=adjusted,
        window=window,
        series_type=series_type,
        expand_underlying=expand_underlying,
        order=order,
        limit=limit,
        client=client,
    )


def ema(
    ticker: str,
    *,
    timestamp: str | int | None = None,
    timespan: str | None = None,
    adjusted: bool | None = None,
    window: int | None = None,
    series_type: str | None = None,
    expand_underlying: bool | None = None,
    order: str | None = None,
    limit: int | None = None,
    client: JsonHttpClient | None = None,
) -> Any:
    """Exponential moving average."""
    return _indicator(
        "ema",
        ticker,
        timestamp=timestamp,
        timespan=timespan,
        adjusted=adjusted,
        window=window,
        series_type=series_type,
        expand_underlying=expand_underlying,
        order=order,
        limit=limit,
        client=client,
    )


def rsi(
    ticker: str,
    *,
    timestamp: str | int | None = None,
    timespan: str | None = None,
    adjusted: bool | None = None,
    window: int | None = None,
    series_type: str | None = None,
    expand_underlying: bool | None = None,
    order: str | None = None,
    limit: int | None = None,
    client: JsonHttpClient | None = None,
) -> Any:
    """Relative strength index; ``window`` is typically 14."""
    return _indicator(
        "rsi",
        ticker,
        timestamp=timestamp,
        timespan=timespan,
        adjusted=adjusted,
        window=window,
        series_type=series_type,
        expand_underlying=expand_underlying,
        order=order,
        limit=limit,
        client=client,
    )


def macd(
    ticker: str,
    *,
    timestamp: str | int | None = None,
    timespan: str | None = None,
    adjusted: bool | None = None,
    short_window: int | None = None,
    long_window: int | None = None,
    signal_window: int | None = None,
    series_type: str | None = None,
    expand_underlying: bool | None = None,
    order: str | None = None,
    limit: int | None = None,
    client: JsonHttpClient | None = None,
) -> Any:
    """Moving average convergence/divergence (commonly 12/26/9 windows)."""
    uri = build_uri(
        f"/v1/indicators/macd/{ticker}",
        {
            "timestamp": timestamp,
            "timespan": timespan,
            "adjusted": adjusted,
            "short_window": short_window,
            "long_window": long_window,
            "signal_window": signal_window,
            "series_type": series_type,
            "expand_underlying": expand_underlying,
            "order": order,
            "limit": limit,
        },
    )
    return _get(uri, client)


def grouped_daily(
    date: str,
    *,
    adjusted: bool | None = None,
    include_otc: bool | None = None,
    client: JsonHttpClient | None = None,
) -> Any:
    """Daily bars for every US stock on ``date`` (``YYYY-MM-DD``)."""
    uri = build_uri(
        f"/v2/aggs/grouped/locale/us/market/stocks/{date}",
        {"adjusted": adjusted, "include_otc": include_otc},
    )
    return _get(uri, client)


def snapshot_all(
    *,
    tickers: str | Sequence[str] | None = None,
    include_otc: bool | None = None,
    client: JsonHttpClient | None = None,
) -> Any:
    """Snapshot of all tickers, optionally restricted to ``tickers``.

    ``tickers`` may be a comma-separated string or a sequence of symbols.
    """
    if tickers is not None and not isinstance(tickers, str):
        if not isinstance(tickers, Sequence) or not all(isinstance(symbol, str) for symbol in tickers):
            raise InvalidQueryParameterError(
                f"tickers must be a string or a sequence of strings, got {tickers!r}"
            )
        tickers = ",".join(tickers)
    uri = build_uri(
        "/v2/snapshot/locale/us/markets/stocks/tickers",
        {"tickers": tickers, "include_otc": include_otc},
    )
    return _get(uri, client)


def snapshot(ticker: str, *, client: JsonHttpClient | None = None) -> Any:
    return _get(f"/v2/snapshot/locale/us/markets/stocks/tickers/{ticker}", client)


def gainers(*, include_otc: bool | None = None, client: JsonHttpClient | None = None) -> Any:
    """Top 20 gainers since the previous close (volume of 10,000 or more)."""
    uri = build_uri("/v2/snapshot/locale/us/markets/stocks/gainers", {"include_otc": include_otc})
    return _get(uri, client)


def losers(*, include_otc: bool | None = None, client: JsonHttpClient | None = None) -> Any:
    """Top 20 losers since the previous close (volume of 10,000 or more)."""
    uri = build_uri("/v2/snapshot/locale/us/markets/stocks/losers", {"include_otc": include_otc})
    return _get(uri, client)


def open_close(
    ticker: str,
    date: str,
    *,
    adjusted: bool | None = None,
    client: JsonHttpClient | None = None,
) -> Any:
    uri = build_uri(f"/v1/open-close/{ticker}/{date}", {"adjusted": adjusted})
    return _get(uri, client)


def _tick_history(
    kind: str,
    ticker: str,
    *,
    timestamp: str | None,
    timestamp_gte: str | None,
    timestamp_gt: str | None,
    timestamp_lte: str | None,
    timestamp_lt: str | None,
    order: str | None,
    limit: int | None,
    sort: str | None,
    client: JsonHttpClient | None,
) -> Any:
    uri = build_uri(
        f"/v3/{kind}/{ticker}",
        {
            "timestamp": timestamp,
            "timestamp.gte": timestamp_gte,
            "timestamp.gt": timestamp_gt,
            "timestamp.lte": timestamp_lte,
            "timestamp.lt": timestamp_lt,
            "order": order,
            "limit": limit,
            "sort": sort,
        },
    )
    return _get(uri, client)


def quotes(
    ticker: str,
    *,
    timestamp: str | None = None,
    timestamp_gte: str | None = None,
    timestamp_gt: str | None = None,
    timestamp_lte: str | None = None,
    timestamp_lt: str | None = None,
    order: str | None = None,
    limit: int | None = None,
    sort: str | None = None,
    client: JsonHttpClient | None = None,
) -> Any:
    """NBBO quotes for ``ticker`` within an optional timestamp range."""
    return _tick_history(
        "quotes",
        ticker,
        timestamp=timestamp,
        timestamp_gte=timestamp_gte,
        timestamp_gt=timestamp_gt,
        timestamp_lte=timestamp_lte,
        timestamp_lt=timestamp_lt,
        order=order,
        limit=limit,
        sort=sort,
        client=client,
    )


def trades(
    ticker: str,
    *,
    timestamp: str | None = None,
    timestamp_gte: str | None = None,
    timestamp_gt: str | None = None,
    timestamp_lte: str | None = None,
    timestamp_lt: str | None = None,
    order: str | None = None,
    limit: int | None = None,
    sort: str | None = None,
    client: JsonHttpClient | None = None,
) -> Any:
    """Trades for ``ticker`` within an optional timestamp range."""
    return _tick_history(
        "trades",
        ticker,
        timestamp=timestamp,
        timestamp_gte=timestamp_gte,
        timestamp_gt=timestamp_gt,
        timestamp_lte=timestamp_lte,
        timestamp_lt=timestamp_lt,
        order=order,
        limit=limit,
        sort=sort,
        client=client,
    )


def splits(
    *,
    ticker: str | None = None,
    ticker_any_of: str | None = None,
    execution_date: str | None = None,
    execution_date_gte: str | None = None,
    execution_date_gt: str | None = None,
    execution_date_lte: str | None = None,
    execution_date_lt: str | None = None,
    adjustment_type: str | None = None,
    adjustment_type_any_of: str | None = None,
    limit: int | None = None,
    sort: str | None = None,
    client: JsonHttpClient | None = None,
) -> Any:
    """Historical split events.

    ``adjustment_type`` is forward_split, reverse_split or stock_dividend;
    ``sort`` takes a column with direction such as ``execution_date.desc``.
    """
    uri = build_uri(
        "/stocks/v1/splits",
        {
            "ticker": ticker,
            "ticker.any_of": ticker_any_of,
            "execution_date": execution_date,
            "execution_date.gte": execution_date_gte,
            "execution_date.gt": execution_date_gt,
            "execution_date.lte": execution_date_lte,
            "execution_date.lt": execution_date_lt,
            "adjustment_type": adjustment_type,
            "adjustment_type.any_of": adjustment_type_any_of,
            "limit": limit,
            "sort": sort,
        },
    )
    return _get(uri, client)


def dividends(
    *,
    ticker: str | None = None,
    ticker_any_of: str | None = None,
    ex_dividend_date: str | None = None,
    ex_dividend_date_gte: str | None = None,
    ex_dividend_date_gt: str | None = None,
    ex_dividend_date_lte: str | None = None,
    ex_dividend_date_lt: str | None = None,
    frequency: int | None = None,
    distribution_type: str | None = None,
    distribution_type_any_of: str | None = None,
    limit: int | None = None,
    sort: str | None = None,
    client: JsonHttpClient | None = None,
) -> Any:
    """Historical cash dividends.

    ``frequency`` is payouts per year: 0 non-recurring, 1 annual,
    4 quarterly, 12 monthly.
    """
    uri = build_uri(
        "/stocks/v1/dividends",
        {
            "ticker": ticker,
            "ticker.any_of": ticker_any_of,
            "ex_dividend_date": ex_dividend_date,
            "ex_dividend_date.gte": ex_dividend_date_gte,
            "ex_dividend_date.gt": ex_dividend_date_gt,
            "ex_dividend_date.lte": ex_dividend_date_lte,
            "ex_dividend_date.lt": ex_dividend_date_lt,
            "frequency": frequency,
            "distribution_type": distribution_type,
            "distribution_type.any_of": distribution_type_any_of,
            "limit": limit,
            "sort": sort,
        },
    )
    return _get(uri, client)
