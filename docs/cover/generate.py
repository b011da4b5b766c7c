cover_generate_description = """
Compress the pairwise conflicts of a graph into cliques, stars, special stars, bipartite blocks and odd cycles

### Request Body

The API endpoint takes the following parameters:

- `vertices`: List of `ConflictVertex` objects, which contain the following information:
    - `id`: Unique vertex id (a decision, e.g. "class 1 at time 3")
    - `classId`: Class the decision belongs to; special stars group leaves by it
    - `timeId`: Time slot of the decision (Optional)
    - `roomId`: Room of the decision (Optional)

- `edges`: List of `ConflictEdge` objects, which contain the following information:
    - `source`: Vertex id of one endpoint
    - `target`: Vertex id of the other endpoint
    - `weight`: Penalty when both endpoints are chosen (default 1.0). A pair given twice keeps the last weight.

- `request`: `CoverRequest` object, which contains the following information:
    - `graphType`: One of "class_time", "class_room", "class_time_room", "hard", "soft"
    - `algorithms`: Any of "clique", "star", "special_star", "bipartite", "odd_cycle".
      Defaults to "clique", or "special_star" for soft graphs.
    - `maxCycleLength`: Longest odd cycle searched (null for no bound)
    - `maxCycleExpansions`: Node expansion budget of the odd cycle search (null for no bound)
    - `allowPartialCycles`: Return the cycles found so far instead of failing when the budget runs out
    - `coverResidualEdges`: Add a 2-clique for every edge the clique cover misses

### Response

- `cliques`, `stars`, `specialStars`, `bipartiteCliques`, `oddCycles`: The covers
- `residualEdges`: Edges not inside any clique of the clique cover
- `constraints`: One record per constraint intent (`kind`, `size`, `members`, `weight`, `class_id`)
- `stats`: Vertex and edge counts, cover sizes and mean shape sizes

### Notes

- Edges that reference unknown vertices are rejected with status 400.
- The bipartite cover splits each connected component at the midpoint of its sorted ids
  without checking that the component is bipartite along that split.
- Odd cycles are not deduplicated: each cycle is reported once per start vertex and direction.
- An exhausted odd cycle budget returns status 422 unless `allowPartialCycles` is set.
"""
