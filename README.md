# clinica

clinica is a small health-management system that runs in the terminal. It holds
patients, doctors, nurses, departments and medicines in memory. It books
appointments and carries them out. It keeps a medical record for each patient
and writes prescriptions.

The interface is in Portuguese.

## Installation

```
pip install .
```

## Running

```
clinica
```

At startup the system loads sample data:

- three departments: Cardiologia, Neurologia and Clinica Geral
- three doctors and two nurses, each assigned to a department
- three patients
- four medicines

The main menu offers these options:

1. Gerenciar Pacientes: add, list, update and remove patients.
2. Gerenciar Medicos: add, list, update and remove doctors.
3. Gerenciar Enfermeiros: add, list, update and remove nurses.
4. Gerenciar Departamentos: add, list, update and remove departments, and assign doctors or nurses to a department.
5. Gerenciar Medicamentos: add, list, update and remove medicines.
6. Consultas: book an appointment, or list appointments. The list can show all appointments, only completed ones, or only scheduled ones.
7. Realizar Consulta: carry out a scheduled appointment. This adds a note to the patient's record and can create a prescription with medicines. The appointment is then marked as completed.
8. Painel do Paciente: work with one patient. You can view the medical record, add a note to it, or replace the whole record. You can list the patient's appointments. You can add a medicine to the prescription of an appointment that is still scheduled, or remove one from it.

Choose `0` to go back or to quit. The program also quits when the input ends.
Errors such as an unknown id are printed to standard error as `ERRO: ...`.

Doctors, nurses and patients take their ids from one shared sequence. The
sample data therefore gives doctors ids 1 to 3, nurses ids 4 and 5, and
patients ids 6 to 8.

## Using it as a library

The domain model works without the terminal:

```python
from clinica.consultas import StatusConsulta
from clinica.sistema import Sistema

sistema = Sistema()
sistema.carregar_dados_padrao()

paciente = sistema.pacientes.buscar_todos()[0]
medico = sistema.medicos.buscar_todos()[0]
consulta = sistema.agendar_consulta(paciente.id, medico.id, "10/07/2024 14:00")

sistema.registrar_atendimento(consulta.id, "Pressao arterial normal.")
receita = consulta.gerar_receita("Tomar por 7 dias")
receita.adicionar_medicamento(sistema.medicamentos.buscar_todos()[0])
consulta.status = StatusConsulta.REALIZADA

print(consulta.info())
print(paciente.prontuario.info())
```

### Modules

- `clinica.repository`: `Repositorio` is an in-memory store keyed by id. It provides `adicionar`, `buscar_por_id`, `buscar_todos` (ordered by id) and `remover`. It raises `EntidadeNaoEncontrada`, a `LookupError`, for ids it does not hold.
- `clinica.pessoas`: `Pessoa`, `Medico`, `Enfermeiro` and `Paciente`. Each has `info()` and `gerar_relatorio_atividade()`. Each patient owns a `Prontuario`.
- `clinica.prontuario`: `Prontuario` is a free-text medical record. Entries added with `adicionar_registro` are separated by a `---` line.
- `clinica.departamento`: `Departamento` holds the doctors and nurses assigned to a department.
- `clinica.medicamentos`: `Medicamento` and `ReceitaMedica`. `remover_medicamento` returns whether any medicine was removed.
- `clinica.consultas`: `Consulta`, `StatusConsulta` (`AGENDADA`, `REALIZADA`, `CANCELADA`), `Agendamento` and `OperacaoInvalida`.
- `clinica.sistema`: `Sistema` ties the repositories and the schedule together. It books appointments, filters them by status, assigns staff to departments and records appointments in the patient's record. It also returns a scheduled appointment's prescription for correction. `data_hora_atual` formats a moment as `DD/MM/AAAA HH:MM`.
- `clinica.terminal`: `Terminal` handles line-based input and output. By default it uses standard input, output and error.
- `clinica.cli_cadastros` and `clinica.cli`: the interactive menus. The entry points are `executar(sistema, terminal)` and `main()`.

## Limitations

- Nothing is saved. All data lives in memory and is lost when the program exits.
- No operation cancels an appointment, although `StatusConsulta.CANCELADA` exists.
- Removing a patient, doctor, department or medicine only removes it from its repository. Appointments, departments and prescriptions that refer to it keep their reference.

## Tests

```
pip install .[test]
pytest
```