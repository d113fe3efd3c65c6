"""
Index query grammar - Lark EBNF grammar for textual secondary index queries.

A textual query names a bucket, an index, and either a match value or a
range, followed by optional paging and filter modifiers:

    FROM accounts.users WHERE age_int BETWEEN 18 AND 65 LIMIT 100 SORTED
    FROM users WHERE email_bin = 'alice@example.com' RETURN TERMS
    FROM users WHERE name_bin BETWEEN 'a' AND 'n' MATCHING '^al' AFTER 'g2gC'

The grammar produces builder calls, not new query semantics.
"""

INDEX_QUERY_GRAMMAR = r'''
start: query

query: from_clause where_clause modifier*

// Location: [bucket_type.]bucket
from_clause: "FROM"i bucket_ref

bucket_ref: bucket_part ("." bucket_part)?

bucket_part: NAME | STRING

// Index predicate - mutually exclusive forms
where_clause: "WHERE"i NAME predicate

predicate: "=" key                          -> match_predicate
         | "BETWEEN"i key "AND"i key        -> range_predicate

key: SIGNED_INT                             -> int_key
   | STRING                                 -> bin_key

// Modifiers
modifier: "LIMIT"i INT                      -> limit_mod
        | "AFTER"i STRING                   -> continuation_mod
        | "SORTED"i                         -> sort_mod
        | "RETURN"i "TERMS"i                -> terms_mod
        | "MATCHING"i STRING                -> filter_mod

// Terminals
NAME: /[a-zA-Z_][a-zA-Z0-9_\-]*/
STRING: /"[^"]*"/ | /'[^']*'/

%import common.INT
%import common.SIGNED_INT
%import common.WS
%ignore WS
COMMENT: /--[^\n]*/
%ignore COMMENT
'''


def get_grammar() -> str:
    """Return the index query grammar string for use with Lark."""
    return INDEX_QUERY_GRAMMAR
