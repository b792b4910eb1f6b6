from typing import Any, Dict, Iterable, List, Mapping, Optional


def _votes(record: Mapping[str, Any]) -> int:
    # node clients may hand back vote counts as decimal strings
    return int(record["votes"])


def constituency_winners(records: Iterable[Mapping[str, Any]]) -> Dict[Any, Optional[str]]:
    """
    Winning party per constituency, in first-seen constituency order.
    Only a strictly greater vote count replaces the current leader, so ties go
    to the candidate listed first.
    """
    leaders: Dict[Any, Mapping[str, Any]] = {}
    for record in records:
        consituency_id = record["consituencyId"]
        leader = leaders.get(consituency_id)
        if leader is None or _votes(record) > _votes(leader):
            leaders[consituency_id] = record
    return {cid: leader["candidateParty"] for cid, leader in leaders.items()}


def party_counts(records: Iterable[Mapping[str, Any]]) -> List[Dict[str, Any]]:
    """One entry per party (first-seen order) with the number of constituencies it won."""
    records = list(records)
    counts: Dict[str, Dict[str, Any]] = {}
    for record in records:
        party = record["candidateParty"]
        if party not in counts:
            counts[party] = {"party": party, "count": 0, "index": len(counts)}

    for party in constituency_winners(records).values():
        counts[party]["count"] += 1

    return list(counts.values())


def election_result(records: Iterable[Mapping[str, Any]]) -> Dict[str, Any]:
    counts = party_counts(records)

    winning_party = None
    winning_seats = 0
    for entry in counts:
        if entry["count"] > winning_seats:
            winning_seats = entry["count"]
            winning_party = entry["party"]

    return {
        "partyCount": counts,
        "winningParty": winning_party,
        "winningSeats": winning_seats,
    }
