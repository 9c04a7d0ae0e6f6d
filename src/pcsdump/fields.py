"""
Field extractors for pcs pages.

Each one takes a single node (a startlist team block, a rider <li>, a table
row) and returns one value.  Three kinds:

    text     stripped text, '' if the element isn't there
    numeric  int of the stripped text, None if it won't parse
    attr     a token of an attribute value, eg the 'dk' in
             <span class="flag dk">, or the slug in <a href="team/uae-2025">

The attr ones are the only ones that can fail.  If the element, the attribute
or the token is missing they return None, or raise ExtractionError when
strict=True (which is how the old scripts behaved, they just fell over).

>>> row = BeautifulSoup(html, 'html.parser').select_one('tbody > tr')
>>> get_country(row)
'dk'
>>> get_first_name(row), get_last_name(row)
('Jonas', 'VINGEGAARD')
"""
from .errors import ExtractionError


def nth(nodes, index):
    """
    The index-th node as a one item list, or [] if out of range.
    Lets tables be picked by position without worrying if they exist
    """

    if 0 <= index < len(nodes):
        return [nodes[index]]

    return []


def select_nth(node, selector, index):
    """
    Lazily walk the matches of selector, returning the index-th as a one
    item list, or [] if there aren't enough
    """

    for i, elem in enumerate(node.css.iselect(selector)):
        if i == index:
            return [elem]

    return []


def get_text(node, selector=None, index=None):
    """
    Stripped text of whatever matches selector under node.
    Multiple matches are joined, like jquery's .text()
    """

    nodes = [node] if selector is None else node.select(selector)

    if index is not None:
        nodes = nth(nodes, index)

    return "".join(x.get_text() for x in nodes).strip()


def get_int(text):
    """
    Base 10 int or None, never raises.
    '' is None too, rather than 0
    """

    try:
        return int(text.strip(), 10)
    except (ValueError, AttributeError):
        return None


def missing(what, strict):
    if strict:
        raise ExtractionError(f"cannot find {what}")

    return None


def get_attr(node, selector, attr, strict=False):
    """
    Whole attribute value of the first match.
    Multi-valued attrs (class) come back space-joined, as in the html
    """

    elem = node if selector is None else node.select_one(selector)

    if elem is None:
        return missing(f"'{selector}'", strict)

    value = elem.get(attr)

    if value is None:
        return missing(f"'{attr}' on '{selector}'", strict)

    if isinstance(value, list):
        value = " ".join(value)

    return value


def get_attr_token(node, selector, attr, position, sep=' ', strict=False):
    """
    Split the attribute value on sep and return the token at position
    """

    value = get_attr(node, selector, attr, strict=strict)

    if value is None:
        return None

    tokens = value.split(sep)

    if not 0 <= position < len(tokens):
        return missing(f"token {position} of {attr}={value!r}", strict)

    return tokens[position]


def get_slug(node, selector, strict=False):
    """
    The short name is the second segment of a link, eg
    'team/uae-team-emirates-2025' -> 'uae-team-emirates-2025'
    """
    return get_attr_token(node, selector, 'href', 1, sep='/', strict=strict)


def has_class(node, class_name):
    # only the node itself, not its ancestors
    return class_name in (node.get('class') or [])


def split_first_name(full_name, surname):
    """
    Best guess at a first name.

    pcs prints riders as '<span class="uppercase">SURNAME</span> First',
    so the first name is taken as the last whitespace token of the anchor
    text that isn't part of the uppercase surname.  Only one token is
    kept, so 'VAN AERT Wout' is fine but 'LÓPEZ Juan Pedro' gives 'Pedro'.
    Falls back to the plain last token if everything is surname.
    """

    tokens = full_name.split()

    if not tokens:
        return ''

    surname_tokens = set(surname.split())
    given = [x for x in tokens if x not in surname_tokens]

    if given:
        return given[-1]

    return tokens[-1]


# STARTLIST
# a team is a '.startlist_v4 > li', a rider a '.ridersCont li' inside it
def get_shirt_image(team):
    return get_attr(team, '.shirtCont img', 'src')


def get_startlist_team_name(team):
    return get_text(team, '.ridersCont a.team')


def get_startlist_team_slug(team, strict=False):
    return get_slug(team, '.ridersCont a.team', strict=strict)


def get_rider_name(rider):
    return get_text(rider, 'a')


def get_rider_country(rider, strict=False):
    return get_attr_token(rider, '.flag', 'class', 1, strict=strict)


def get_bib(rider):
    return get_text(rider, '.bib')


def is_dropout(rider):
    return has_class(rider, 'dropout')


# RESULT ROWS
# rows of the '#resultsCont > .resTab' tables
def get_place(row):
    return get_int(get_text(row, 'td', 0))


def get_gc(row):
    return get_text(row, 'td.fs11', 0)


def get_time_difference(row):
    return get_text(row, 'td.fs11', 1)


def get_start_number(row):
    return get_text(row, 'td.bibs')


def get_country(row, strict=False):
    return get_attr_token(row, 'td.ridername > .flag', 'class', 1,
                          strict=strict)


def get_last_name(row):
    return get_text(row, 'td.ridername > a span.uppercase')


def get_first_name(row):
    """
    See split_first_name
    """
    return split_first_name(get_text(row, 'td.ridername > a'),
                            get_last_name(row))


def get_team(row):
    return get_text(row, 'td.cu600 > a')


def get_short_name(row, strict=False):
    return get_slug(row, 'td.cu600 > a', strict=strict)


def get_uci_points(row):
    return get_text(row, 'td.uci_pnt')


def get_points(row):
    return get_text(row, 'td.points')


def get_qualification_time(row):
    return get_text(row, 'td.cu600 > .blue')


def get_class(row):
    return get_text(row, 'td', 4)


def get_points_total(row):
    """
    The cell after the team cell
    """

    cell = row.select_one('td.cu600')

    if cell is None:
        return None

    nxt = cell.find_next_sibling()

    if nxt is None:
        return None

    return get_int(get_text(nxt))


def get_points_gained(row):
    """
    Points classification shows today's gain as eg '+20'
    """

    tokens = get_text(row, 'td.green').split('+')

    if len(tokens) < 2:
        return None

    return get_int(tokens[1])


def get_mountain_points(row):
    return get_int(get_text(row, 'td.green'))


# teams are named by the link right after their flag
def get_flag_link(node):
    flag = node.select_one('span.flag')

    if flag is None:
        return None

    return flag.find_next_sibling()


def get_team_name(node):
    link = get_flag_link(node)

    if link is None:
        return ''

    return get_text(link)


def get_team_short_name(node, strict=False):
    link = get_flag_link(node)

    if link is None:
        return missing("link after 'span.flag'", strict)

    return get_slug(link, None, strict=strict)


# TTT
# a team is an <li> of '.ttt-results', its riders the rows of its table
def get_ttt_place(team):
    return get_int(get_text(team, '.mb_w100 .w10'))


def get_ttt_rider_last_name(row):
    return get_text(row, 'td > a span.uppercase')


def get_ttt_rider_first_name(row):
    return split_first_name(get_text(row, 'td > a'),
                            get_ttt_rider_last_name(row))
