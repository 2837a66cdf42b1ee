from .roster import label, load_roster, parse_clique, resolve_cliques

__all__ = ["label", "load_roster", "parse_clique", "resolve_cliques"]
