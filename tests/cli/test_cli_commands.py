# SPDX-License-Identifier: MIT
"""
Tests for the kubereport CLI.
"""
import json

from kubereport import __version__
from kubereport.cli import main

REPORT = {
    "ClusterName": "prod",
    "Vulnerabilities": [
        {
            "Namespace": "kube-system",
            "Kind": "Pod",
            "Name": "kube-apiserver",
            "Results": [
                {"Target": "registry.k8s.io/kube-apiserver:v1.28.0", "Class": "os-pkgs",
                 "Vulnerabilities": [{"VulnerabilityID": "CVE-2023-1"}]}
            ],
        }
    ],
    "Misconfigurations": [
        {
            "Namespace": "kube-system",
            "Kind": "Pod",
            "Name": "kube-apiserver",
            "Results": [
                {"Target": "Pod/kube-apiserver", "Class": "config", "Type": "kubernetes",
                 "Misconfigurations": [{"ID": "KCV0001", "Status": "FAIL"},
                                       {"ID": "KSV012", "Status": "FAIL"}]}
            ],
        },
        {
            "Kind": "ClusterRole",
            "Name": "admin",
            "Results": [
                {"Target": "ClusterRole/admin", "Class": "config", "Type": "kubernetes",
                 "Misconfigurations": [{"ID": "KSV041", "Status": "FAIL"}]}
            ],
        },
    ],
}


def _write_report(tmp_path):
    path = tmp_path / "report.json"
    path.write_text(json.dumps(REPORT))
    return path


class TestReportCommand:
    """Test the report subcommand."""

    def test_table_views(self, tmp_path, capsys):
        path = _write_report(tmp_path)

        assert main(["report", str(path)]) == 0

        output = json.loads(capsys.readouterr().out)
        assert [v["title"] for v in output] == [
            "Workload Assessment",
            "RBAC Assessment",
            "Infra Assessment",
        ]
        assert output[1]["columns"] == ["Namespace", "Resource", "RBAC Assessment"]

    def test_scanner_flags(self, tmp_path, capsys):
        path = _write_report(tmp_path)

        assert main(["report", str(path), "--scanners", "rbac"]) == 0

        output = json.loads(capsys.readouterr().out)
        assert [v["title"] for v in output] == ["RBAC Assessment"]

    def test_json_consolidated(self, tmp_path, capsys):
        path = _write_report(tmp_path)

        assert main(["report", str(path), "--format", "json"]) == 0

        output = json.loads(capsys.readouterr().out)
        assert output["ClusterName"] == "prod"
        assert len(output["Findings"]) == 2
        api_server = next(f for f in output["Findings"] if f["Name"] == "kube-apiserver")
        assert [r["Target"] for r in api_server["Results"]] == [
            "Pod/kube-apiserver",
            "registry.k8s.io/kube-apiserver:v1.28.0",
        ]

    def test_unknown_format_in_config(self, tmp_path, capsys):
        path = _write_report(tmp_path)
        (tmp_path / ".kubereport.yml").write_text("format: xml\n")

        assert main(["report", str(path)]) == 1
        assert "unknown format" in capsys.readouterr().err

    def test_bad_scanner_flag(self, tmp_path, capsys):
        path = _write_report(tmp_path)

        assert main(["report", str(path), "--scanners", "vuln,nope"]) == 1
        assert "nope" in capsys.readouterr().err

    def test_missing_report(self, tmp_path, capsys):
        assert main(["report", str(tmp_path / "missing.json")]) == 1
        assert "Error reading report" in capsys.readouterr().err

    def test_report_not_an_object(self, tmp_path, capsys):
        path = tmp_path / "report.json"
        path.write_text("[]")

        assert main(["report", str(path)]) == 1
        assert "Error reading report: expected a JSON object, got list" in capsys.readouterr().err

    def test_null_check_id(self, tmp_path, capsys):
        """Test that a null check ID on a system pod is treated as a workload check."""
        path = tmp_path / "report.json"
        path.write_text(json.dumps({
            "ClusterName": "prod",
            "Misconfigurations": [
                {"Namespace": "kube-system", "Kind": "Pod", "Name": "etcd",
                 "Results": [{"Target": "Pod/etcd", "Type": "kubernetes",
                              "Misconfigurations": [{"ID": None, "Status": "FAIL"}]}]},
            ],
        }))

        assert main(["report", str(path)]) == 0

        output = json.loads(capsys.readouterr().out)
        assert output[0]["title"] == "Workload Assessment"
        resource = output[0]["report"]["Misconfigurations"][0]
        assert resource["Results"][0]["Misconfigurations"] == [{"ID": "", "Status": "FAIL"}]

    def test_empty_scanner_flag_disables_all(self, tmp_path, capsys):
        path = _write_report(tmp_path)

        assert main(["report", str(path), "--scanners", ""]) == 0
        assert json.loads(capsys.readouterr().out) == []

    def test_severities_and_summary_reach_views(self, tmp_path, capsys):
        path = _write_report(tmp_path)
        (tmp_path / ".kubereport.yml").write_text("report: summary\nseverities: [critical, high]\n")

        assert main(["report", str(path), "--scanners", "rbac"]) == 0

        output = json.loads(capsys.readouterr().out)
        assert output[0]["severities"] == ["CRITICAL", "HIGH"]
        assert output[0]["summary"] is True


class TestComplianceCommand:
    """Test the compliance subcommand."""

    def test_scanners_listed(self, tmp_path, capsys):
        spec = tmp_path / "spec.yaml"
        spec.write_text(
            "spec:\n"
            "  id: k8s-nsa\n"
            "  title: NSA\n"
            "  controls:\n"
            "    - id: '1.0'\n"
            "      name: Non-root containers\n"
            "      checks:\n"
            "        - id: AVD-KSV012\n"
            "    - id: '7.0'\n"
            "      name: No critical vulnerabilities\n"
            "      checks:\n"
            "        - id: CVE-9999-9999\n"
        )

        assert main(["compliance", str(spec)]) == 0

        output = json.loads(capsys.readouterr().out)
        assert output["scanners"] == ["misconfig", "vuln"]
        assert output["checks"] == {"misconfig": ["AVD-KSV012"], "vuln": ["CVE-9999-9999"]}

    def test_unrecognized_check(self, tmp_path, capsys):
        spec = tmp_path / "spec.yaml"
        spec.write_text("spec:\n  id: x\n  controls:\n    - id: '1.0'\n      checks:\n        - id: UNKNOWN-001\n")

        assert main(["compliance", str(spec)]) == 1
        assert "UNKNOWN-001" in capsys.readouterr().err


def test_version(capsys):
    assert main(["version"]) == 0
    assert capsys.readouterr().out.strip() == __version__
