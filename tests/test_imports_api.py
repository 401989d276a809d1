"""
Bulk import endpoint tests: uploads run through the real services.
"""

import io

from openpyxl import load_workbook


CLIENTS_CSV = (
    b"name,employeeName,contactPerson,email,phone,address,gstTaxId,industry,region,status\n"
    b"Sample Airlines Ltd,John Doe,Jane Smith,contact@sampleairlines.com,,123 Airport Road,GST1,airlines,North America,active\n"
    b"Demo Travel Agency,,Mike Johnson,,,,,Travel,Europe,active\n"
    b"Globex Tours,,,,,,,ota,,\n"
)


async def test_client_csv_import_reports_each_row(test_client):
    response = await test_client.post(
        "/api/v1/imports/clients",
        files={"file": ("clients.csv", CLIENTS_CSV, "text/csv")},
    )

    assert response.status_code == 200
    report = response.json()
    assert report["kind"] == "clients"
    assert report["filename"] == "clients.csv"
    assert report["total"] == 3
    assert report["success_count"] == 2
    assert report["failure_count"] == 1
    assert report["results"][1] == {
        "row": 3,
        "label": "Demo Travel Agency",
        "success": False,
        "error": "Invalid industry. Must be one of: airlines, travel_agency, gds, ota, aviation_services",
    }

    listing = (await test_client.get("/api/v1/clients")).json()
    assert sorted(c["name"] for c in listing["items"]) == ["Globex Tours", "Sample Airlines Ltd"]


async def test_duplicate_in_database_fails_only_that_row(test_client, sample_client):
    content = (
        b"clientName,crNo,employeeName,amount,currency,startDate,endDate,status\n"
        b"Sample Airlines Ltd,CR-1,,100,INR,2024-01-01,2024-01-31,initiated\n"
        b"Sample Airlines Ltd,CR-1,,100,INR,2024-01-01,2024-01-31,initiated\n"
        b"Sample Airlines Ltd,CR-2,Priya Nair,100,INR,2024-01-01,2024-01-31,approved\n"
    )

    response = await test_client.post(
        "/api/v1/imports/cr_invoices",
        files={"file": ("cr.csv", content, "text/csv")},
    )

    report = response.json()
    assert [r["success"] for r in report["results"]] == [True, False, True]
    assert report["results"][1]["error"] == "CR number CR-1 already exists"
    assert report["results"][0]["label"] == "Sample Airlines Ltd - CR-1"

    listing = (await test_client.get("/api/v1/cr-invoices")).json()
    by_number = {item["cr_no"]: item for item in listing["items"]}
    assert by_number["CR-1"]["employee_name"] == "Casey Manager"
    assert by_number["CR-2"]["employee_name"] == "Priya Nair"


async def test_unsupported_format_is_400(test_client):
    response = await test_client.post(
        "/api/v1/imports/clients",
        files={"file": ("clients.txt", b"name\nAcme\n", "text/plain")},
    )

    assert response.status_code == 400
    error = response.json()["error"]
    assert error["message"] == "Unsupported file format. Please upload CSV or Excel file."
    assert error["details"] == "clients.txt"


async def test_empty_upload_is_400(test_client):
    response = await test_client.post(
        "/api/v1/imports/clients",
        files={"file": ("clients.csv", b"", "text/csv")},
    )

    assert response.status_code == 400
    assert response.json()["error"]["message"] == "Uploaded file is empty"


async def test_unknown_kind_is_422(test_client):
    response = await test_client.post(
        "/api/v1/imports/invoices",
        files={"file": ("invoices.csv", b"a\nb\n", "text/csv")},
    )

    assert response.status_code == 422


async def test_viewer_cannot_import(test_client, viewer_user, login_as):
    login_as(viewer_user)

    response = await test_client.post(
        "/api/v1/imports/users",
        files={"file": ("users.csv", b"email\nx@example.com\n", "text/csv")},
    )

    assert response.status_code == 403
    assert response.json()["error"]["details"] == "Permission 'users:write' required"


async def test_template_download(test_client):
    response = await test_client.get("/api/v1/imports/agreements/template")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith(
        "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"
    )
    assert "agreements_import_template.xlsx" in response.headers["content-disposition"]

    sheet = load_workbook(io.BytesIO(response.content)).active
    assert sheet["A1"].value == "clientName"
