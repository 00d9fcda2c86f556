"""Fixed PostgreSQL vocabularies used for case classification and layout."""

from enum import Enum

RESERVED_WORDS = frozenset({
    "SELECT", "FROM", "WHERE", "JOIN", "INNER", "LEFT", "RIGHT", "FULL", "OUTER",
    "ON", "AND", "OR", "NOT", "IN", "EXISTS", "BETWEEN", "LIKE", "IS", "NULL",
    "INSERT", "INTO", "VALUES", "UPDATE", "SET", "DELETE", "CREATE", "TABLE",
    "ALTER", "DROP", "INDEX", "VIEW", "DISTINCT", "ORDER", "BY", "GROUP",
    "HAVING", "LIMIT", "OFFSET", "UNION", "ALL", "AS", "CASE", "WHEN", "THEN",
    "ELSE", "END", "IF", "WITH", "RECURSIVE", "WINDOW", "OVER", "PARTITION",
    "PRIMARY", "KEY", "FOREIGN", "REFERENCES", "UNIQUE", "CHECK", "DEFAULT",
    "CONSTRAINT", "DATABASE", "SCHEMA", "GRANT", "REVOKE", "COMMIT", "ROLLBACK",
    "TRANSACTION", "BEGIN", "START", "SAVEPOINT", "RELEASE",
})

FUNCTIONS = frozenset({
    "COUNT", "SUM", "AVG", "MIN", "MAX", "COALESCE", "NULLIF", "GREATEST",
    "LEAST", "CONCAT", "LENGTH", "SUBSTR", "SUBSTRING", "UPPER", "LOWER",
    "TRIM", "LTRIM", "RTRIM", "REPLACE", "SPLIT_PART", "POSITION", "NOW",
    "CURRENT_DATE", "CURRENT_TIME", "CURRENT_TIMESTAMP", "EXTRACT", "DATE_PART",
    "AGE", "TO_CHAR", "TO_DATE", "TO_TIMESTAMP", "CAST", "CONVERT", "ROUND",
    "CEIL", "FLOOR", "ABS", "POWER", "SQRT", "MOD", "RANDOM", "GENERATE_SERIES",
})

# Clause openers: each starts a new line at the current nesting level.
MAJOR_KEYWORDS = frozenset({
    "SELECT", "FROM", "WHERE", "GROUP", "ORDER", "HAVING",
    "INSERT", "UPDATE", "DELETE", "CREATE", "ALTER", "DROP",
    "WITH", "UNION", "EXCEPT", "INTERSECT",
})

JOIN_KEYWORDS = frozenset({"JOIN", "INNER", "LEFT", "RIGHT", "FULL", "CROSS"})

# Words that stay on the SELECT line instead of opening the select list.
SELECT_MODIFIERS = frozenset({"DISTINCT", "ALL"})


class WordClass(str, Enum):
    RESERVED = "reserved"
    FUNCTION = "function"
    OBJECT = "object"


def classify_word(word: str) -> WordClass:
    upper = word.upper()
    if upper in RESERVED_WORDS:
        return WordClass.RESERVED
    if upper in FUNCTIONS:
        return WordClass.FUNCTION
    return WordClass.OBJECT
