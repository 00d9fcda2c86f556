import logging
import re
from concurrent.futures import ThreadPoolExecutor

import pytest
from pgsql_formatter import SQLFormatter, format_sql
from pgsql_formatter.models import CaseStyle, FormatterConfig
from pgsql_formatter.rules.structure import StructureRule

SAMPLE_SQL = (
    "select u.id, u.name, p.title from users u left join posts p on u.id = p.user_id "
    "where u.active = true and p.published_at > '2023-01-01' order by u.name, p.created_at desc;"
)

SAMPLE_EXPECTED = (
    "SELECT\n"
    "    u.id,\n"
    "    u.name,\n"
    "    p.title\n"
    "FROM users u\n"
    "    LEFT\n"
    "    JOIN posts p\n"
    "    ON u.id = p.user_id\n"
    "WHERE u.active = true AND p.published_at > '2023-01-01'\n"
    "ORDER BY u.name, p.created_at desc;"
)

RECURSIVE_SQL = (
    "WITH RECURSIVE employee_hierarchy AS (    SELECT id, name, manager_id, 0 as level    "
    "FROM employees    WHERE manager_id IS NULL    UNION ALL    SELECT e.id, e.name, e.manager_id, "
    "eh.level + 1    FROM employees e    INNER JOIN employee_hierarchy eh ON e.manager_id = eh.id) "
    "SELECT eh.level, eh.name, COUNT(sub.id) as subordinates FROM employee_hierarchy eh "
    "LEFT JOIN employee_hierarchy sub ON eh.id = sub.manager_id GROUP BY eh.level, eh.name "
    "HAVING COUNT(sub.id) > 0 ORDER BY eh.level, eh.name;"
)

LITERAL_RE = re.compile(r"'(?:[^'\\]|\\.)*'|\"(?:[^\"\\]|\\.)*\"|--[^\r\n]*|/\*[\s\S]*?\*/")


class TestScenarios:
    def test_simple_select(self):
        result = SQLFormatter().format("select id from users;")
        assert result == "SELECT\n    id\nFROM users;"

    def test_select_list_under_select(self):
        result = SQLFormatter().format("SELECT a, b FROM t")
        lines = result.split("\n")
        assert lines[0] == "SELECT"
        assert lines[1] == "    a,"
        assert lines[2] == "    b"
        assert lines[3] == "FROM t"

    def test_duplicate_literals_restored_independently(self):
        result = SQLFormatter().format("select 'x' as a from t where b = 'x'")
        assert result == "SELECT\n    'x' AS a\nFROM t\nWHERE b = 'x'"
        assert result.count("'x'") == 2

    def test_subquery_nesting(self):
        result = SQLFormatter().format("select * from (select 1) t")
        assert result == "SELECT\n    *\nFROM (\n    SELECT\n        1) t"
        lines = result.split("\n")
        assert lines[0].startswith("SELECT")
        assert lines[3] == "    SELECT"

    def test_function_capitalize(self):
        config = FormatterConfig(function_case=CaseStyle.CAPITALIZE)
        result = SQLFormatter(config).format("select count(id) from t")
        assert result == "SELECT\n    Count (id)\nFROM t"

    def test_sample_query(self):
        assert SQLFormatter().format(SAMPLE_SQL) == SAMPLE_EXPECTED

    def test_custom_indentation(self):
        config = FormatterConfig(function_case=CaseStyle.CAPITALIZE, indent_size=2, base_indent=4)
        result = SQLFormatter(config).format("select count(*) from t where a in (select b from u)")
        assert result == (
            "    SELECT\n"
            "      Count (*)\n"
            "    FROM t\n"
            "    WHERE a IN (\n"
            "      SELECT\n"
            "        b\n"
            "      FROM u)"
        )


class TestDegenerateInput:
    @pytest.mark.parametrize("sql", ["", " ", "\n\t  \n"])
    def test_blank_input_returned_as_is(self, sql):
        assert SQLFormatter().format(sql) == sql

    def test_none_returned_as_is(self):
        assert SQLFormatter().format(None) is None

    @pytest.mark.parametrize("sql", [
        "select 'unterminated from t",
        'select "unterminated from t',
        "select a from t where b = 'x\\",
        "/* never closed select 1",
        "-- only a comment",
        "((((((",
        "))))) select",
        "select (((a, b from t",
        ";;;",
        "select ___STRING_0___ from t",
        "(" * 500 + "select 1" + ")" * 500,
        "select é, ü from «t»",
    ])
    def test_never_raises(self, sql):
        result = SQLFormatter().format(sql)
        assert isinstance(result, str)
        assert result

    def test_unterminated_quote_consumes_rest(self):
        result = SQLFormatter().format("select a, 'oops from t")
        assert result == "SELECT\n    a,\n    'oops FROM t"

    def test_comment_only(self):
        assert SQLFormatter().format("  -- only a comment\n") == "-- only a comment"

    def test_crlf_literals_keep_their_bytes(self):
        assert SQLFormatter().format("select 'a\r\nb' from t") == "SELECT\n    'a\r\nb'\nFROM t"
        assert SQLFormatter().format("select a -- note\r\nfrom t") == "SELECT\n    a -- note\nFROM t"

    def test_non_breaking_space_stays_inside_word(self):
        assert SQLFormatter().format("select a\u00a0b from t") == "SELECT\n    a\u00a0b\nFROM t"


class TestProperties:
    @pytest.mark.parametrize("sql", [
        SAMPLE_SQL,
        "select 'a  b', \"Weird  Col\" /* multi\n  line */ from t -- tail",
        "insert into t (a, b) values ('it''s', E'\\n') ; -- done",
        "select 'a\r\nb' from t",
        "select a /* x\r\ny */ from t\r\n-- note\r\nwhere b = \"c\r\nd\"",
    ])
    def test_literal_integrity(self, sql):
        result = SQLFormatter().format(sql)
        originals = LITERAL_RE.findall(sql)
        position = 0
        for literal in originals:
            found = result.find(literal, position)
            assert found >= 0, literal
            position = found + len(literal)

    @pytest.mark.parametrize("config", [
        FormatterConfig(),
        FormatterConfig(reserved_word_case=CaseStyle.LOWERCASE, object_case=CaseStyle.UPPERCASE),
        FormatterConfig(reserved_word_case=CaseStyle.CAPITALIZE, function_case=CaseStyle.CAPITALIZE),
    ])
    def test_case_determinism(self, config):
        formatter = SQLFormatter(config)
        once = formatter.format(RECURSIVE_SQL)
        twice = formatter.format(once)
        assert twice.split() == once.split()

    @pytest.mark.parametrize("sql", [
        SAMPLE_SQL,
        RECURSIVE_SQL,
        "select * from (select 1) t",
        "SELECT a FROM t WHERE x = 1 -- keep\nAND y = 2",
        "select 'line\n  break' as s, /* a\n   b */ c from t",
    ])
    def test_reformatting_is_stable(self, sql):
        formatter = SQLFormatter(FormatterConfig(base_indent=2))
        once = formatter.format(sql)
        assert formatter.format(once) == once

    def test_shared_instance_across_threads(self):
        formatter = SQLFormatter()
        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(formatter.format, [SAMPLE_SQL] * 64))
        assert set(results) == {SAMPLE_EXPECTED}


def test_recursive_query_layout():
    config = FormatterConfig(function_case=CaseStyle.CAPITALIZE, indent_size=2)
    lines = SQLFormatter(config).format(RECURSIVE_SQL).split("\n")
    assert lines[0] == "WITH RECURSIVE employee_hierarchy AS ("
    assert lines[1] == "  SELECT"
    assert "  UNION ALL" in lines
    assert "SELECT" in lines
    assert "  Count (sub.id) AS subordinates" in lines
    assert lines[-1] == "ORDER BY eh.level, eh.name;"


def test_internal_failure_returns_input(monkeypatch, caplog):
    def explode(self, context):
        raise RuntimeError("boom")

    monkeypatch.setattr(StructureRule, "apply", explode)
    sql = "select a from t"
    with caplog.at_level(logging.WARNING, logger="pgsql_formatter.formatter"):
        assert SQLFormatter().format(sql) == sql
    assert "boom" in caplog.text


def test_format_sql_helper():
    assert format_sql("select id from users;") == "SELECT\n    id\nFROM users;"
    config = FormatterConfig(reserved_word_case=CaseStyle.LOWERCASE)
    assert format_sql("SELECT id FROM users", config) == "select\n    id\nfrom users"


def test_default_config_when_omitted():
    assert SQLFormatter().config == FormatterConfig()
