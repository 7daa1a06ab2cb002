"""The GraphViz DOT format: syntax tree, lexing, parsing and printing."""