from fakepeople import bench


def test_naive_sample_seeded():
    assert bench.naive_sample(['a', 'b', 'c'], 20, seed=1) == bench.naive_sample(['a', 'b', 'c'], 20, seed=1)
    assert len(bench.naive_sample(['a'], 5)) == 5


def test_time_sampling_keys(reference):
    timings = bench.time_sampling(reference, 1000)
    assert set(timings) == {'naive', 'vectorized'}
    assert all(t >= 0 for t in timings.values())


def test_time_workers_cleans_up(reference):
    timings = bench.time_workers(reference, 100, 2, [1, 2])
    assert set(timings) == {1, 2}


def test_format_report():
    lines = bench.format_report({'naive': 1.0, 'vectorized': 0.1}, {2: 0.5}, 1000)
    assert lines[0] == 'Sampling 1,000 names:'
    assert any('10.0x' in line for line in lines)
    assert any('2 worker(s)' in line and '2,000 rows/sec' in line for line in lines)
