import io

from wire_sim.batch import GroupRuns, ShapeRun
from wire_sim.config import SimConfig
from wire_sim.report import BufferedReporter, TextReporter, format_header, format_run
from wire_sim.shapes import Cosine, Straight

RESULTS = [
    GroupRuns("straight", (ShapeRun("Straight", Straight(), time=1.0, steps=10),)),
    GroupRuns("cos", (
        ShapeRun("Cosine(#periods =    1, amplitude = 0.0500)", Cosine(1, 0.05), time=0.81234567, steps=8),
        ShapeRun("Cosine(#periods =    2, amplitude = 0.0500)", Cosine(2, 0.05),
                 error="v.x < 0 at t=0.100000 s", error_type="BackwardMotionError"),
    )),
]

def test_header():
    assert format_header(SimConfig()) == (
        "m = 0.1 kg, L = 1.0 m, mu = 0.0, vI = Vec(x=1.0, z=0.0) m/s, g = 9.81 m/s²"
    )

def test_result_lines():
    assert format_run(RESULTS[0].runs[0]) == "t_f(Straight) = 1.000000 s"
    assert format_run(RESULTS[1].runs[0]) == "t_f(Cosine(#periods =    1, amplitude = 0.0500)) = 0.812346 s"
    assert format_run(RESULTS[1].runs[1]) == (
        "t_f(Cosine(#periods =    2, amplitude = 0.0500)) failed: v.x < 0 at t=0.100000 s"
    )

def test_text_reporter():
    out = io.StringIO()
    TextReporter(out).report_all(SimConfig(), RESULTS)
    lines = out.getvalue().splitlines()
    assert lines[0].startswith("m = 0.1 kg")
    assert lines[1] == ""
    assert lines[2] == "t_f(Straight) = 1.000000 s"
    assert lines[3] == ""
    assert len(lines) == 6

def test_buffered_reporter():
    rep = BufferedReporter()
    rep.report_all(SimConfig(mu=0.1), RESULTS)
    assert "mu = 0.1" in rep.header
    assert list(rep.lines) == ["straight", "cos"]
    assert len(rep.lines["cos"]) == 2
