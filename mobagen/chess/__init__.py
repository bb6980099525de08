"""Chess board representation, piece move generation, a material heuristic and a look-ahead search."""