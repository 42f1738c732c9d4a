"""Partitioned Bloom filter: sizing, MurmurHash3 hashing and an in-memory filter."""