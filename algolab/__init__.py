"""Classic algorithms: sorting, string matching, convex hulls, the 15 puzzle, backtracking, matrix products, knapsack, vertex cover, shortest paths, spanning trees and maximum flow."""

__version__ = "0.1.0"