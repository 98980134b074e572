import httpx
import pytest

from stock_relay.provider import (
    build_report_url,
    extract_name,
    parse_report,
    read_body,
    resolve_trade_date,
    shares_to_lots,
    to_stock_info,
)


def test_name_is_third_title_token():
    assert extract_name("113年10月 2330 台積電") == "台積電"
    assert extract_name("113年10月 2330 台積電           各日成交資訊") == "台積電"


@pytest.mark.parametrize("title", [None, "", "2330 台積電"])
def test_name_falls_back(title):
    assert extract_name(title) == "N/A"


def test_volume_in_round_lots():
    assert shares_to_lots("12000000") == 12000
    assert shares_to_lots(12000000) == 12000
    assert shares_to_lots("12,345,678") == 12345.678
    assert shares_to_lots("--") is None
    assert shares_to_lots(None) is None


def test_parse_report_rejects_unusable_bodies():
    assert parse_report("<html></html>") is None
    assert parse_report({"stat": "OK"}) is None
    assert parse_report({"stat": "OK", "data": "oops"}) is None
    assert parse_report({"stat": "查詢日期大於今日，請重新查詢!", "data": [["x"]]}) is None


def test_latest_row_wins():
    report = parse_report({
        "stat": "OK",
        "data": [
            ["d1", "", "", 1, 2, 3, 4, "", 1000],
            ["d2", "", "", 5, 6, 7, 8, "", 2000],
        ],
    })
    stock = to_stock_info("0050", report)
    assert (stock.open, stock.high, stock.low, stock.close) == (5, 6, 7, 8)
    assert stock.volume == 2
    assert stock.name == "N/A"


def test_report_url():
    url = build_report_url("2330", "20241002")
    assert url == "https://www.twse.com.tw/exchangeReport/STOCK_DAY?response=json&date=20241002&stockNo=2330"


def test_trade_date():
    assert resolve_trade_date("20241002") == "20241002"
    assert len(resolve_trade_date()) == 8
    with pytest.raises(ValueError):
        resolve_trade_date("2024/10/02")


def test_read_body_rejects_non_standard_tokens():
    assert read_body(httpx.Response(200, json={"stat": "OK"})) == {"stat": "OK"}
    assert read_body(httpx.Response(200, content=b'{"x": Infinity}')) == '{"x": Infinity}'
    assert read_body(httpx.Response(200, content=b"<html></html>")) == "<html></html>"
