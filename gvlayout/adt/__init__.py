"""Data structures: the ranked DAG and the scoped map."""