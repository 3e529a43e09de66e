from datetime import date


def test_create_employee_defaults(client, make_position):
    position = make_position()
    response = client.post(
        "/api/employees",
        json={"firstName": "Grace", "lastName": "Hopper", "positionId": position["id"], "hireDate": "2023-03-01T00:00:00.000Z"},
    )
    assert response.status_code == 201
    body = response.json()
    assert body["isActive"] is True
    assert body["email"] is None
    assert body["hireDate"] == "2023-03-01"
    assert body["positionId"] == position["id"]


def test_snake_case_input_is_accepted(client):
    response = client.post("/api/employees", json={"first_name": "Alan", "last_name": "Turing", "hire_date": "2020-01-15"})
    assert response.status_code == 201
    assert response.json()["hireDate"] == date(2020, 1, 15).isoformat()


def test_names_are_required(client):
    response = client.post("/api/employees", json={"firstName": "Solo"})
    assert response.status_code == 400
    assert [e["loc"][-1] for e in response.json()["errors"]] == ["lastName"]


def test_invalid_hire_date_is_rejected(client):
    response = client.post("/api/employees", json={"firstName": "A", "lastName": "B", "hireDate": "not-a-date"})
    assert response.status_code == 400


def test_unknown_position_is_404(client):
    response = client.post("/api/employees", json={"firstName": "A", "lastName": "B", "positionId": 42})
    assert response.status_code == 404
    assert response.json()["message"] == "Position not found"


def test_deactivate_keeps_row(client, make_employee):
    employee = make_employee()
    response = client.put(f"/api/employees/{employee['id']}", json={"isActive": False})
    assert response.status_code == 200
    assert response.json()["isActive"] is False
    assert response.json()["firstName"] == employee["firstName"]
    assert client.get(f"/api/employees/{employee['id']}").status_code == 200


def test_update_missing_employee_is_404(client):
    assert client.put("/api/employees/12345", json={"department": "Ops"}).status_code == 404


def test_evaluation_records_evaluator(client, make_employee, make_skill):
    employee = make_employee()
    skill = make_skill()
    response = client.post(
        f"/api/employees/{employee['id']}/skills",
        json={"skillId": skill["id"], "currentLevel": 3, "notes": "Solid joins", "evaluatedBy": "someone-else"},
    )
    assert response.status_code == 201
    body = response.json()
    assert body["employeeId"] == employee["id"]
    assert body["currentLevel"] == 3
    assert body["evaluatedBy"] == "user-hr-1"
    assert body["evaluationDate"]

    listed = client.get(f"/api/employees/{employee['id']}/skills").json()
    assert [e["id"] for e in listed] == [body["id"]]


def test_evaluation_level_outside_scale_is_rejected(client, make_employee, make_skill):
    employee = make_employee()
    skill = make_skill()
    for level in (0, 6, True):
        response = client.post(f"/api/employees/{employee['id']}/skills", json={"skillId": skill["id"], "currentLevel": level})
        assert response.status_code == 400
        assert response.json()["message"] == "Invalid employee skill data"


def test_evaluation_for_missing_employee_is_404(client, make_skill):
    skill = make_skill()
    response = client.post("/api/employees/77/skills", json={"skillId": skill["id"], "currentLevel": 3})
    assert response.status_code == 404
    assert response.json()["message"] == "Employee not found"


def test_update_and_delete_evaluation(client, make_employee, make_skill, evaluate):
    employee = make_employee()
    evaluation = evaluate(employee, make_skill(), 2)

    response = client.put(f"/api/employee-skills/{evaluation['id']}", json={"currentLevel": 4})
    assert response.status_code == 200
    assert response.json()["currentLevel"] == 4
    assert response.json()["evaluatedBy"] == evaluation["evaluatedBy"]

    assert client.put(f"/api/employee-skills/{evaluation['id']}", json={"currentLevel": 9}).status_code == 400
    assert client.put(f"/api/employee-skills/{evaluation['id']}", json={"currentLevel": None}).status_code == 400
    assert client.put("/api/employee-skills/999", json={"currentLevel": 3}).status_code == 404

    assert client.delete(f"/api/employee-skills/{evaluation['id']}").status_code == 204
    assert client.delete(f"/api/employee-skills/{evaluation['id']}").status_code == 204
    assert client.get(f"/api/employees/{employee['id']}/skills").json() == []


def test_delete_employee_removes_evaluations(client, db, make_employee, make_skill, evaluate):
    from skillmatrix.models import EmployeeSkill

    employee = make_employee()
    evaluate(employee, make_skill(), 3)
    assert client.delete(f"/api/employees/{employee['id']}").status_code == 204
    assert db.query(EmployeeSkill).count() == 0


def test_evaluation_date_with_offset_is_stored_as_utc(client, make_employee, make_skill):
    employee = make_employee()
    response = client.post(
        f"/api/employees/{employee['id']}/skills",
        json={"skillId": make_skill()["id"], "currentLevel": 3, "evaluationDate": "2024-01-01T10:00:00+05:00"},
    )
    assert response.status_code == 201
    assert response.json()["evaluationDate"] == "2024-01-01T05:00:00"

    evaluation_id = response.json()["id"]
    response = client.put(f"/api/employee-skills/{evaluation_id}", json={"evaluationDate": "2024-03-10T23:30:00-02:00"})
    assert response.status_code == 200
    assert response.json()["evaluationDate"] == "2024-03-11T01:30:00"

    response = client.put(f"/api/employee-skills/{evaluation_id}", json={"evaluationDate": "2024-06-01T08:00:00"})
    assert response.json()["evaluationDate"] == "2024-06-01T08:00:00"
