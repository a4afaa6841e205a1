"""Integration tests — full adapter pipeline through the registry.

Covers the three reference scenarios: an object compilation, a link of a
single archive, and a link driven by a linker command file.
"""

from __future__ import annotations

import hashlib

from conftest import IDENTITY_TEXT, FakeRunner, ar_archive, ar_header

from toolcache.core.archive import AR_SIGNATURE
from toolcache.models.invocation import BuildFileRole, ExpectedFile
from toolcache.wrappers.registry import default_registry


class TestObjectCompilation:
    def test_scenario_preprocessed_text_is_fingerprint(self, in_tmp_dir, settings):
        runner = FakeRunner(preprocessed="int x;")
        wrapper = default_registry().find_wrapper(
            ["/opt/ti/bin/cl6x", "--compile_only", "--output_file=out.o", "foo.c"],
            runner=runner,
            settings=settings,
        )
        record = wrapper.fingerprint()

        assert record.content_fingerprint == "int x;"
        assert record.build_files == {BuildFileRole.OBJECT: ExpectedFile(path="out.o")}
        assert record.toolchain_identity == IDENTITY_TEXT
        assert runner.calls[0][-2] == "--preproc_only"
        assert "--compile_only" not in runner.calls[0]
        assert runner.calls[-1] == ["/opt/ti/bin/cl6x", "--help"]
        assert list(settings.temp_dir.iterdir()) == []

    def test_include_path_churn_keeps_key(self, in_tmp_dir, make_file, settings):
        make_file("foo.c", "int x;")
        records = []
        for include in ("-I/home/alice/proj/inc", "-I/build/agent7/proj/inc"):
            wrapper = default_registry().find_wrapper(
                ["cl6x", include, "-O3", "--compile_only", "--output_file=out.o", "foo.c"],
                runner=FakeRunner(),
                settings=settings,
            )
            records.append(wrapper.fingerprint())
        assert records[0].canonical_bytes() == records[1].canonical_bytes()
        assert records[0].relevant_arguments == ["cl6x", "-O3", "--compile_only"]

    def test_legacy_encoded_literals_keep_distinct_keys(self, in_tmp_dir, settings):
        keys = []
        for literal in (b"caf\xe9", b"caf\xe8"):
            wrapper = default_registry().find_wrapper(
                ["cl6x", "--compile_only", "--output_file=out.o", "foo.c"],
                runner=FakeRunner(preprocessed=b'const char *s = "' + literal + b'";'),
                settings=settings,
            )
            keys.append(wrapper.fingerprint().canonical_bytes())
        assert keys[0] != keys[1]

    def test_response_file_invocation(self, in_tmp_dir, make_file, settings):
        make_file("opts.txt", "--compile_only\n-O3\n--output_file=out.o\n")
        wrapper = default_registry().find_wrapper(
            ["cl6x", "--cmd_file=opts.txt", "foo.c"], runner=FakeRunner(), settings=settings
        )
        record = wrapper.fingerprint()
        assert record.build_files[BuildFileRole.OBJECT].path == "out.o"
        assert record.relevant_arguments == ["cl6x", "--compile_only", "-O3", "foo.c"]


class TestArchiveLink:
    def test_scenario_single_member_archive(self, in_tmp_dir, make_file, settings):
        header = ar_header(b"obj1.o", 4, timestamp=1234567890)
        make_file("lib.a", AR_SIGNATURE + header + b"AAAA")
        runner = FakeRunner()
        wrapper = default_registry().find_wrapper(
            ["cl6x", "--run_linker", "--output_file=app.out", "lib.a"],
            runner=runner,
            settings=settings,
        )
        record = wrapper.fingerprint()

        expected = hashlib.sha256(header[:16] + header[28:60] + b"AAAA").hexdigest()
        assert record.content_fingerprint == expected
        assert record.build_files == {BuildFileRole.LINK_TARGET: ExpectedFile(path="app.out")}
        assert record.relevant_arguments == ["cl6x", "--run_linker"]
        # Only the identity probe runs for a link
        assert runner.calls == [["cl6x", "--help"]]

    def test_scenario_timestamp_independent(self, in_tmp_dir, make_file, settings):
        digests = set()
        for timestamp in (0, 1234567890, 999999999999):
            make_file("lib.a", AR_SIGNATURE + ar_header(b"obj1.o", 4, timestamp) + b"AAAA")
            wrapper = default_registry().find_wrapper(
                ["cl6x", "--run_linker", "--output_file=app.out", "lib.a"],
                runner=FakeRunner(),
                settings=settings,
            )
            digests.add(wrapper.fingerprint().content_fingerprint)
        assert len(digests) == 1

    def test_map_and_dependency_declared(self, in_tmp_dir, make_file, settings):
        make_file("main.obj", b"OBJ")
        wrapper = default_registry().find_wrapper(
            [
                "cl6x",
                "--run_linker",
                "--output_file=app.out",
                "--map_file=app.map",
                "main.obj",
            ],
            runner=FakeRunner(),
            settings=settings,
        )
        record = wrapper.fingerprint()
        assert set(record.build_files) == {BuildFileRole.LINK_TARGET, BuildFileRole.MAP}


class TestLinkerCommandFile:
    def test_scenario_cmd_file_folds_library_content(self, in_tmp_dir, make_file, settings):
        make_file("extra.a", ar_archive([(b"e.o/", b"EXTRA")]))
        make_file("link.cmd", '-stack 0x1000\n-l"extra.a"\n')
        args = ["cl6x", "--run_linker", "--output_file=app.out", "link.cmd"]

        before = default_registry().find_wrapper(
            args, runner=FakeRunner(), settings=settings
        ).fingerprint()

        # Same library path, different content
        make_file("extra.a", ar_archive([(b"e.o/", b"EXTRB")]))
        after = default_registry().find_wrapper(
            args, runner=FakeRunner(), settings=settings
        ).fingerprint()

        assert before.content_fingerprint != after.content_fingerprint
        assert before.relevant_arguments == ["cl6x", "--run_linker"]

    def test_literal_line_change_changes_fingerprint(self, in_tmp_dir, make_file, settings):
        make_file("extra.a", b"plain library")
        args = ["cl6x", "--run_linker", "--output_file=app.out", "link.cmd"]
        digests = []
        for stack in ("0x1000", "0x2000"):
            make_file("link.cmd", f'-stack {stack}\n-l"extra.a"\n')
            digests.append(
                default_registry()
                .find_wrapper(args, runner=FakeRunner(), settings=settings)
                .fingerprint()
                .content_fingerprint
            )
        assert digests[0] != digests[1]

    def test_library_path_string_not_hashed(self, in_tmp_dir, make_file, settings):
        make_file("a/extra.a", b"same bytes")
        make_file("b/extra.a", b"same bytes")
        digests = []
        for directory in ("a", "b"):
            make_file("link.cmd", f'-l"{directory}/extra.a"\n')
            digests.append(
                default_registry()
                .find_wrapper(
                    ["cl6x", "--run_linker", "--output_file=app.out", "link.cmd"],
                    runner=FakeRunner(),
                    settings=settings,
                )
                .fingerprint()
                .content_fingerprint
            )
        assert digests[0] == digests[1]
